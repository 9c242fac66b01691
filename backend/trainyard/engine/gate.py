"""
Encounter gate - decides whether a character may face their master.
"""

from __future__ import annotations

import logging

from trainyard.engine.masters import MASTER_LEVEL_CEILING
from trainyard.models.character import CharacterState
from trainyard.models.encounter import GateStatus

logger = logging.getLogger(__name__)


class EncounterGate:
    """Eligibility state machine for the daily master encounter.

    Conditions are checked in a fixed order and the first match wins:
        1. dead -> INELIGIBLE_DEAD
        2. level above the ceiling -> INELIGIBLE_TOO_EXPERIENCED
        3. already engaged today -> INELIGIBLE_ALREADY_ENGAGED
        4. otherwise -> ELIGIBLE

    Being dead outranks everything else, so a dead veteran who already
    fought today is still reported as dead.
    """

    def __init__(self, ceiling: int = MASTER_LEVEL_CEILING):
        self.ceiling = ceiling

    def evaluate(self, character: CharacterState) -> GateStatus:
        """Evaluate the gate for a character. Pure; never mutates state."""
        if not character.alive:
            status = GateStatus.INELIGIBLE_DEAD
        elif character.level > self.ceiling:
            status = GateStatus.INELIGIBLE_TOO_EXPERIENCED
        elif character.has_engaged_today:
            status = GateStatus.INELIGIBLE_ALREADY_ENGAGED
        else:
            status = GateStatus.ELIGIBLE

        logger.debug("Gate for %s evaluated to %s", character.id, status.value)
        return status

    def is_eligible(self, character: CharacterState) -> bool:
        return self.evaluate(character) == GateStatus.ELIGIBLE
