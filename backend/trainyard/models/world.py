"""
World schema models - Pydantic models for YAML world definitions
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from trainyard.errors import NotFound


class Directionality(str, Enum):
    """Which way a connection may be travelled"""
    BIDIRECTIONAL = "bidirectional"
    UNIDIRECTIONAL = "unidirectional"  # Only from outgoing to incoming


class ConnectionGroup(BaseModel):
    """Named bucket a location declares for its outgoing navigation"""
    name: str
    title: str


class Location(BaseModel):
    """Location/scene definition from locations.yaml"""
    id: str
    title: str
    description: str = ""
    connection_groups: list[ConnectionGroup] = Field(default_factory=list)

    def has_connection_group(self, name: str) -> bool:
        return any(group.name == name for group in self.connection_groups)

    def get_connection_group(self, name: str) -> ConnectionGroup:
        """Get a declared connection group by name"""
        for group in self.connection_groups:
            if group.name == name:
                return group
        raise NotFound("connection group", f"{self.id}/{name}")

    def paragraphs(self) -> list[str]:
        """Split the description into paragraphs, collapsing YAML line wrapping"""
        return [
            " ".join(chunk.split())
            for chunk in self.description.split("\n\n")
            if chunk.strip()
        ]


class Connection(BaseModel):
    """Edge between two locations from connections.yaml"""
    outgoing: str
    incoming: str
    outgoing_group: str | None = None  # Group the action appears in at the outgoing end
    incoming_group: str | None = None  # Group the action appears in at the incoming end
    directionality: Directionality = Directionality.BIDIRECTIONAL

    def touches(self, location_id: str) -> bool:
        return location_id in (self.outgoing, self.incoming)


class Master(BaseModel):
    """Training master responsible for a bracket of levels"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    min_level: int = Field(ge=1)
    max_level: int = Field(ge=1)
    weapon: str = ""

    def covers(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level


class World(BaseModel):
    """Main world definition from world.yaml"""
    name: str
    description: str = ""
    starting_location: str
    training_location: str


class WorldData(BaseModel):
    """Complete loaded world data"""
    world: World
    locations: dict[str, Location]
    connections: list[Connection] = Field(default_factory=list)
    masters: list[Master] = Field(default_factory=list)

    def get_location(self, location_id: str) -> Location | None:
        """Get a location by ID"""
        return self.locations.get(location_id)

    def get_connections_of(self, location_id: str) -> list[Connection]:
        """Get every connection touching a location, in file order"""
        return [c for c in self.connections if c.touches(location_id)]
