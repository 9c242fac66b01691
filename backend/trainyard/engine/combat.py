"""
Protocol for the external combat engine.

The yard never runs a fight itself. It asks the engine to start one and,
once the engine reports the fight is over, resolves the result.

Component Flow:
    TrainingGround.start_encounter -> CombatEngine.start_combat -> battle id
                                              ...
    combat engine finishes -> CombatResult -> TrainingGround.resolve
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from trainyard.models.encounter import CombatRequest


@runtime_checkable
class CombatEngine(Protocol):
    """Protocol for starting fights on the external combat engine.

    Implementations must eventually report exactly one CombatResult per
    started fight, tagged with the request's context_tag.
    """

    def start_combat(self, request: "CombatRequest") -> str:
        """Start a fight.

        Args:
            request: Who fights whom, and where the fight was started

        Returns:
            Identifier of the started battle

        Raises:
            Exception: Whatever the engine raises if it cannot start the fight
        """
        ...
