"""
Shared pytest fixtures for training yard tests.

This module provides:
- sample_world_data: Small WorldData with one-way and two-way connections
- sample_masters: A master table covering levels 1-15
- make_character: Factory for CharacterState with sensible defaults
- combat_engine: Mock combat engine
- training_ground: TrainingGround wired to the fixtures above
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from trainyard.engine.state import CharacterStateManager  # noqa: E402
from trainyard.engine.training import TrainingGround  # noqa: E402
from trainyard.models.character import CharacterState  # noqa: E402
from trainyard.models.world import (  # noqa: E402
    Connection,
    ConnectionGroup,
    Directionality,
    Location,
    Master,
    World,
    WorldData,
)
from tests.mocks.combat import MockCombatEngine  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# World Data Fixtures
# =============================================================================


@pytest.fixture
def sample_locations() -> dict[str, Location]:
    """Create a small scene graph for testing.

    Layout:
        [village] <--> [training_ground] <-- [watchtower] (one-way jump down)
            |
            +--> [forest] (two-way, default group on the forest side)
    """
    return {
        "village": Location(
            id="village",
            title="Village",
            description="The village square hustles and bustles.",
            connection_groups=[ConnectionGroup(name="outside", title="Outside")],
        ),
        "training_ground": Location(
            id="training_ground",
            title="Bluspring's Warrior Training",
            description="There is nothing left for you here but memories.",
            connection_groups=[
                ConnectionGroup(name="trainyard", title="The Yard"),
                ConnectionGroup(name="back", title="Back"),
            ],
        ),
        "watchtower": Location(
            id="watchtower",
            title="The Watchtower",
            description="The only way down is a long jump.",
            connection_groups=[ConnectionGroup(name="descend", title="Ways Down")],
        ),
        "forest": Location(
            id="forest",
            title="The Forest",
            description="Home to evil creatures.",
        ),
    }


@pytest.fixture
def sample_connections() -> list[Connection]:
    """Connections for sample_locations, in file order."""
    return [
        Connection(
            outgoing="village",
            incoming="training_ground",
            outgoing_group="outside",
            incoming_group="back",
        ),
        Connection(
            outgoing="watchtower",
            incoming="training_ground",
            outgoing_group="descend",
            directionality=Directionality.UNIDIRECTIONAL,
        ),
        Connection(
            outgoing="village",
            incoming="forest",
            outgoing_group="outside",
        ),
    ]


@pytest.fixture
def sample_masters() -> list[Master]:
    """Masters covering levels 1-15 in three brackets."""
    return [
        Master(id="mieraband", name="Mieraband", min_level=1, max_level=4),
        Master(id="fie", name="Fie", min_level=5, max_level=9),
        Master(id="yoresh", name="Yoresh", min_level=10, max_level=15),
    ]


@pytest.fixture
def sample_world_data(
    sample_locations: dict[str, Location],
    sample_connections: list[Connection],
    sample_masters: list[Master],
) -> WorldData:
    """Create complete WorldData for testing."""
    return WorldData(
        world=World(
            name="Test World",
            starting_location="village",
            training_location="training_ground",
        ),
        locations=sample_locations,
        connections=sample_connections,
        masters=sample_masters,
    )


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def make_character() -> Callable[..., CharacterState]:
    """Factory for characters; defaults to an eligible level 1 hero.

    Usage:
        def test_something(make_character):
            veteran = make_character(level=16)
    """

    def _factory(**overrides) -> CharacterState:
        values = {"id": "hero", "name": "Hero"}
        values.update(overrides)
        return CharacterState(**values)

    return _factory


@pytest.fixture
def hero(make_character) -> CharacterState:
    """An eligible level 5 character with no experience."""
    return make_character(level=5, experience=0, needed_experience=100)


@pytest.fixture
def characters(hero: CharacterState) -> CharacterStateManager:
    return CharacterStateManager([hero])


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def combat_engine() -> MockCombatEngine:
    return MockCombatEngine()


@pytest.fixture
def training_ground(
    sample_world_data: WorldData,
    characters: CharacterStateManager,
    combat_engine: MockCombatEngine,
) -> TrainingGround:
    return TrainingGround(sample_world_data, characters, combat_engine)
