"""Unit tests for EncounterGate.

Tests cover:
- Each status reachable
- Strict priority ordering (dead first)
- Determinism and purity
"""

import itertools

import pytest

from trainyard.engine.gate import EncounterGate
from trainyard.engine.masters import MASTER_LEVEL_CEILING
from trainyard.models.encounter import GateStatus


class TestEncounterGate:
    """Tests for EncounterGate.evaluate."""

    @pytest.fixture
    def gate(self) -> EncounterGate:
        return EncounterGate()

    def test_eligible(self, gate, make_character) -> None:
        assert gate.evaluate(make_character(level=5)) == GateStatus.ELIGIBLE
        assert gate.is_eligible(make_character(level=5)) is True

    def test_dead(self, gate, make_character) -> None:
        assert gate.evaluate(make_character(alive=False)) == GateStatus.INELIGIBLE_DEAD

    def test_ceiling_level_is_still_eligible(self, gate, make_character) -> None:
        character = make_character(level=MASTER_LEVEL_CEILING)

        assert gate.evaluate(character) == GateStatus.ELIGIBLE

    def test_above_ceiling_is_too_experienced(self, gate, make_character) -> None:
        character = make_character(level=16)

        assert gate.evaluate(character) == GateStatus.INELIGIBLE_TOO_EXPERIENCED

    def test_already_engaged(self, gate, make_character) -> None:
        character = make_character(has_engaged_today=True)

        assert gate.evaluate(character) == GateStatus.INELIGIBLE_ALREADY_ENGAGED

    def test_dead_outranks_everything(self, gate, make_character) -> None:
        character = make_character(alive=False, level=16, has_engaged_today=True)

        assert gate.evaluate(character) == GateStatus.INELIGIBLE_DEAD

    def test_too_experienced_outranks_already_engaged(self, gate, make_character) -> None:
        character = make_character(level=16, has_engaged_today=True)

        assert gate.evaluate(character) == GateStatus.INELIGIBLE_TOO_EXPERIENCED

    def test_evaluate_is_total_and_deterministic(self, gate, make_character) -> None:
        for alive, level, engaged in itertools.product(
            (True, False), (1, MASTER_LEVEL_CEILING, MASTER_LEVEL_CEILING + 1), (True, False)
        ):
            character = make_character(alive=alive, level=level, has_engaged_today=engaged)
            snapshot = character.model_copy()

            first = gate.evaluate(character)

            assert isinstance(first, GateStatus)
            assert gate.evaluate(character) == first
            assert character == snapshot

    def test_custom_ceiling(self, make_character) -> None:
        gate = EncounterGate(ceiling=3)

        assert gate.evaluate(make_character(level=4)) == GateStatus.INELIGIBLE_TOO_EXPERIENCED
