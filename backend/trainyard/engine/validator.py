"""
World Validator - Validates consistency of YAML world definitions

Checks:
- Connection references: endpoints exist and differ
- Connection groups: every group a connection uses is declared at that end
- Duplicate connections between the same pair of locations (warnings)
- Master table: brackets cover every level up to the ceiling without overlap
- World references: starting and training locations exist
- Isolated locations with no connections (warnings)
"""

from dataclasses import dataclass, field
from pathlib import Path

from trainyard.engine.masters import bracket_errors
from trainyard.engine.world import WorldLoader
from trainyard.models.world import WorldData


@dataclass
class ValidationResult:
    """Result of world validation"""

    world_id: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """World is valid if there are no errors (warnings are OK)"""
        return len(self.errors) == 0

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)


class WorldValidator:
    """Validates world definition consistency"""

    def __init__(self, world_data: WorldData, world_id: str):
        self.world_data = world_data
        self.world_id = world_id
        self.result = ValidationResult(world_id=world_id)

    def validate(self) -> ValidationResult:
        """Run all validation checks"""
        self._validate_connection_references()
        self._validate_connection_groups()
        self._detect_duplicate_connections()
        self._validate_master_table()
        self._validate_world_references()
        self._detect_isolated_locations()

        return self.result

    def _validate_connection_references(self):
        """Check both endpoints of every connection exist and differ"""
        valid_locations = set(self.world_data.locations.keys())

        for index, connection in enumerate(self.world_data.connections):
            for end, loc_id in (("from", connection.outgoing), ("to", connection.incoming)):
                if loc_id not in valid_locations:
                    self.result.add_error(
                        f"Connection #{index} '{end}' points to invalid location '{loc_id}'"
                    )
            if connection.outgoing == connection.incoming:
                self.result.add_error(
                    f"Connection #{index} connects '{connection.outgoing}' to itself"
                )

    def _validate_connection_groups(self):
        """Check every group used by a connection is declared at that end"""
        for index, connection in enumerate(self.world_data.connections):
            ends = (
                (connection.outgoing, connection.outgoing_group),
                (connection.incoming, connection.incoming_group),
            )
            for loc_id, group_name in ends:
                location = self.world_data.get_location(loc_id)
                if location is None or group_name is None:
                    continue
                if not location.has_connection_group(group_name):
                    self.result.add_error(
                        f"Connection #{index} uses group '{group_name}' not declared by location '{loc_id}'"
                    )

    def _detect_duplicate_connections(self):
        """Warn about location pairs connected more than once"""
        seen: dict[frozenset[str], int] = {}
        for index, connection in enumerate(self.world_data.connections):
            pair = frozenset((connection.outgoing, connection.incoming))
            if pair in seen:
                self.result.add_warning(
                    f"Connection #{index} duplicates connection #{seen[pair]} "
                    f"between '{connection.outgoing}' and '{connection.incoming}'"
                )
            else:
                seen[pair] = index

    def _validate_master_table(self):
        """Check the master brackets are total and non-overlapping"""
        if not self.world_data.masters:
            self.result.add_error("World defines no masters")
            return
        for message in bracket_errors(self.world_data.masters):
            self.result.add_error(message)

    def _validate_world_references(self):
        """Check the locations world.yaml refers to exist"""
        world = self.world_data.world
        for key, loc_id in (
            ("starting_location", world.starting_location),
            ("training_location", world.training_location),
        ):
            if loc_id not in self.world_data.locations:
                self.result.add_error(f"World {key} '{loc_id}' is invalid")

    def _detect_isolated_locations(self):
        """Detect locations nothing connects to (warnings only)"""
        for loc_id in self.world_data.locations:
            if not self.world_data.get_connections_of(loc_id):
                self.result.add_warning(f"Location '{loc_id}' has no connections")


def validate_world(
    world_id: str, worlds_dir: str | Path | None = None
) -> ValidationResult:
    """
    Validate a world definition for consistency.

    Args:
        world_id: The world identifier (folder name in worlds/)
        worlds_dir: Optional path to worlds directory

    Returns:
        ValidationResult with errors and warnings
    """
    loader = WorldLoader(worlds_dir)
    world_data = loader.load_world(world_id, validate=False)

    validator = WorldValidator(world_data, world_id)
    return validator.validate()
