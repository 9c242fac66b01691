"""
Connection graph - read-only view of how locations connect.

World topology is immutable after setup, so the graph indexes the
connections once and every query afterwards is a pure lookup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trainyard.errors import NotFound

if TYPE_CHECKING:
    from trainyard.models.world import Connection, Location, WorldData


class ConnectionGraph:
    """Query surface over a world's locations and connections.

    Connections are kept in world-file order, which is the stable
    iteration order every query returns them in.

    Example:
        >>> graph = ConnectionGraph(world_data)
        >>> for connection in graph.connections_of("village"):
        ...     print(connection.incoming)
    """

    def __init__(self, world: "WorldData"):
        self._locations = dict(world.locations)
        self._touching: dict[str, list["Connection"]] = {
            location_id: [] for location_id in self._locations
        }

        for connection in world.connections:
            for endpoint in (connection.outgoing, connection.incoming):
                if endpoint not in self._touching:
                    raise NotFound("location", endpoint)
            self._touching[connection.outgoing].append(connection)
            if connection.incoming != connection.outgoing:
                self._touching[connection.incoming].append(connection)

    def get_location(self, location_id: str) -> "Location":
        """Get a location, failing with NotFound if it does not exist"""
        location = self._locations.get(location_id)
        if location is None:
            raise NotFound("location", location_id)
        return location

    def connections_of(self, location_id: str) -> list["Connection"]:
        """All connections touching a location, outgoing or incoming"""
        self.get_location(location_id)
        return list(self._touching[location_id])

    def outgoing(self, location_id: str) -> list["Connection"]:
        """Connections where the location is the outgoing endpoint"""
        return [c for c in self.connections_of(location_id) if c.outgoing == location_id]

    def incoming(self, location_id: str) -> list["Connection"]:
        """Connections where the location is the incoming endpoint"""
        return [c for c in self.connections_of(location_id) if c.incoming == location_id]
