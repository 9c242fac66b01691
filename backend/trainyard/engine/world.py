"""
World loader - Load and validate YAML world files
"""

import logging
from pathlib import Path

import yaml

from trainyard.config import get_worlds_dir
from trainyard.models.world import (
    Connection,
    ConnectionGroup,
    Directionality,
    Location,
    Master,
    World,
    WorldData,
)

logger = logging.getLogger(__name__)


class WorldLoader:
    """Loads game worlds from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        if worlds_dir is None:
            worlds_dir = get_worlds_dir()
        self.worlds_dir = Path(worlds_dir)

    def list_worlds(self) -> list[dict]:
        """List available worlds with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if not (world_path.is_dir() and world_yaml.exists()):
                continue
            try:
                with open(world_yaml) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning("Skipping world %s: %s", world_path.name, e)
                continue
            worlds.append({
                "id": world_path.name,
                "name": data.get("name", world_path.name),
                "description": " ".join(str(data.get("description", "")).split()),
            })

        return worlds

    def load_world(self, world_id: str, validate: bool = True) -> WorldData:
        """
        Load a complete world from YAML files.

        Args:
            world_id: The world identifier (folder name in worlds/)
            validate: Whether to validate the world on load (default True)

        Returns:
            WorldData with all world content

        Raises:
            FileNotFoundError: If world doesn't exist
            ValueError: If validation fails and validate=True
        """
        world_path = self.worlds_dir / world_id

        if not world_path.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_path}")

        world_data = WorldData(
            world=self._load_world_yaml(world_path / "world.yaml"),
            locations=self._load_locations_yaml(world_path / "locations.yaml"),
            connections=self._load_connections_yaml(world_path / "connections.yaml"),
            masters=self._load_masters_yaml(world_path / "masters.yaml"),
        )
        logger.info(
            "Loaded world %s: %d location(s), %d connection(s), %d master(s)",
            world_id,
            len(world_data.locations),
            len(world_data.connections),
            len(world_data.masters),
        )

        if validate:
            from trainyard.engine.validator import WorldValidator
            result = WorldValidator(world_data, world_id).validate()

            if not result.is_valid:
                error_list = "\n  - ".join(result.errors)
                raise ValueError(
                    f"World '{world_id}' validation failed with {len(result.errors)} error(s):\n  - {error_list}"
                )
            for warning in result.warnings:
                logger.warning("World %s: %s", world_id, warning)

        return world_data

    def _load_world_yaml(self, path: Path) -> World:
        """Load world.yaml"""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return World(
            name=data.get("name", "Unnamed World"),
            description=data.get("description", ""),
            starting_location=data.get("starting_location", "village"),
            training_location=data.get("training_location", "training_ground"),
        )

    def _load_locations_yaml(self, path: Path) -> dict[str, Location]:
        """Load locations.yaml"""
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        locations = {}
        for loc_id, loc_data in data.items():
            # Groups are a mapping of name -> title, order preserved
            groups = [
                ConnectionGroup(name=name, title=title)
                for name, title in (loc_data.get("connection_groups") or {}).items()
            ]
            locations[loc_id] = Location(
                id=loc_id,
                title=loc_data.get("title", loc_id),
                description=loc_data.get("description", ""),
                connection_groups=groups,
            )

        return locations

    def _load_connections_yaml(self, path: Path) -> list[Connection]:
        """Load connections.yaml"""
        if not path.exists():
            return []

        with open(path) as f:
            data = yaml.safe_load(f) or []

        connections = []
        for conn_data in data:
            connections.append(Connection(
                outgoing=conn_data["from"],
                incoming=conn_data["to"],
                outgoing_group=conn_data.get("from_group"),
                incoming_group=conn_data.get("to_group"),
                directionality=Directionality(
                    conn_data.get("directionality", Directionality.BIDIRECTIONAL.value)
                ),
            ))

        return connections

    def _load_masters_yaml(self, path: Path) -> list[Master]:
        """Load masters.yaml"""
        if not path.exists():
            return []

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        masters = []
        for master_id, master_data in data.items():
            # Either a single `level` or a `levels: [min, max]` bracket
            if "level" in master_data:
                min_level = max_level = master_data["level"]
            elif "levels" in master_data:
                min_level, max_level = master_data["levels"]
            else:
                raise ValueError(
                    f"Master '{master_id}' in {path.name} needs 'level' or 'levels'"
                )
            masters.append(Master(
                id=master_id,
                name=master_data.get("name", master_id),
                min_level=min_level,
                max_level=max_level,
                weapon=master_data.get("weapon", ""),
            ))

        return masters
