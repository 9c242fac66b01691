"""
Mock combat engine for deterministic testing.

Records every fight the training yard starts and lets tests build the
matching CombatResult without running any actual combat.

Example:
    >>> engine = MockCombatEngine()
    >>> handle = yard.start_encounter("hero")
    >>> result = engine.conclude(winner_id="hero")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from trainyard.models.encounter import CombatRequest, CombatResult


class CombatEngineUnavailable(RuntimeError):
    """Raised by the mock when told to refuse new fights"""


@dataclass
class MockCombatEngine:
    """Mock combat engine.

    Attributes:
        requests: Every CombatRequest received, in order
        fail: When True, start_combat raises CombatEngineUnavailable
    """

    requests: list[CombatRequest] = field(default_factory=list)
    fail: bool = False

    def start_combat(self, request: CombatRequest) -> str:
        if self.fail:
            raise CombatEngineUnavailable("combat engine is not accepting fights")
        self.requests.append(request)
        return f"battle-{len(self.requests)}"

    @property
    def last_request(self) -> CombatRequest:
        return self.requests[-1]

    def conclude(self, winner_id: str, context_tag: str | None = None) -> CombatResult:
        """Build the result of the most recent fight.

        Args:
            winner_id: Who won; the other participant is the loser
            context_tag: Override the tag, e.g. to simulate an unrelated fight
        """
        request = self.last_request
        loser_id = (
            request.defender.id if winner_id == request.attacker_id else request.attacker_id
        )
        return CombatResult(
            context_tag=context_tag or request.context_tag,
            winner_id=winner_id,
            loser_id=loser_id,
            referrer_location_id=request.origin_location_id,
        )
