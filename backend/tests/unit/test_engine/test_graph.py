"""Unit tests for ConnectionGraph.

Tests cover:
- Connections touching a location, in file order
- Outgoing/incoming views
- NotFound for unknown locations and dangling connections
"""

import pytest

from trainyard.engine.graph import ConnectionGraph
from trainyard.errors import NotFound
from trainyard.models.world import Connection


class TestConnectionGraph:
    """Tests for ConnectionGraph."""

    @pytest.fixture
    def graph(self, sample_world_data) -> ConnectionGraph:
        return ConnectionGraph(sample_world_data)

    def test_connections_of_training_ground(self, graph) -> None:
        """Both the two-way and the one-way connection touch the yard."""
        connections = graph.connections_of("training_ground")

        assert [(c.outgoing, c.incoming) for c in connections] == [
            ("village", "training_ground"),
            ("watchtower", "training_ground"),
        ]

    def test_outgoing_and_incoming(self, graph) -> None:
        assert [c.incoming for c in graph.outgoing("village")] == ["training_ground", "forest"]
        assert graph.incoming("village") == []
        assert [c.outgoing for c in graph.incoming("training_ground")] == [
            "village",
            "watchtower",
        ]

    def test_get_location(self, graph) -> None:
        assert graph.get_location("forest").title == "The Forest"

    def test_unknown_location_raises_not_found(self, graph) -> None:
        with pytest.raises(NotFound) as exc_info:
            graph.connections_of("dragon_lair")

        assert exc_info.value.kind == "location"
        assert exc_info.value.key == "dragon_lair"

    def test_dangling_connection_raises_not_found(self, sample_world_data) -> None:
        sample_world_data.connections.append(
            Connection(outgoing="village", incoming="dragon_lair")
        )

        with pytest.raises(NotFound):
            ConnectionGraph(sample_world_data)

    def test_queries_return_copies(self, graph) -> None:
        """Callers cannot change the topology through query results."""
        graph.connections_of("village").clear()

        assert len(graph.connections_of("village")) == 2
