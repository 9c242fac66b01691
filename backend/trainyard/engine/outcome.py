"""
Encounter outcome handler - reconciles a finished master fight.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trainyard.models.encounter import ResolvedView

if TYPE_CHECKING:
    from trainyard.engine.gate import EncounterGate
    from trainyard.engine.state import CharacterStateManager
    from trainyard.engine.yard import YardViewBuilder
    from trainyard.models.encounter import CombatHandle, CombatResult

logger = logging.getLogger(__name__)

WIN_TITLE = "You won!"
WIN_TEXT = "You defeated {master}. You gain no experience."
LOSS_TITLE = "You died!"
LOSS_TEXT = "You have been defeated by {master}. They stand over your dead body, laughing."


class EncounterOutcomeHandler:
    """Turns a combat result back into a navigable view.

    Steps, for results tagged with the handle's context:
        1. Mark the character as having engaged today, win or lose
        2. Narrate the outcome, naming the master
        3. Rebuild the full navigation of the location the fight started from,
           discarding whatever actions the combat engine was showing
        4. Re-run the gate so the fresh status shows right away

    Results carrying any other context tag belong to other fights and are
    returned untouched as None.
    """

    def __init__(
        self,
        characters: "CharacterStateManager",
        gate: "EncounterGate",
        views: "YardViewBuilder",
    ):
        self.characters = characters
        self.gate = gate
        self.views = views

    def on_combat_concluded(
        self, handle: "CombatHandle", result: "CombatResult"
    ) -> ResolvedView | None:
        """Resolve a concluded fight.

        Args:
            handle: The fight the yard started
            result: The combat engine's report

        Returns:
            ResolvedView, or None if the result belongs to another fight
        """
        if result.context_tag != handle.context_tag:
            logger.warning(
                "Ignoring combat result tagged %r while waiting on %r",
                result.context_tag,
                handle.context_tag,
            )
            return None

        character = self.characters.get_character(handle.character_id)
        self.characters.mark_engaged(character.id)

        character_won = result.winner_id == character.id
        viewpoint = self.views.build_view(result.referrer_location_id)

        if character_won:
            viewpoint.title = WIN_TITLE
            viewpoint.set_description(WIN_TEXT.format(master=handle.master.name))
        else:
            viewpoint.title = LOSS_TITLE
            viewpoint.set_description(LOSS_TEXT.format(master=handle.master.name))

        status = self.gate.evaluate(character)
        self.views.apply_gate(viewpoint, character, status, append=True)

        logger.info(
            "Master fight %s concluded: %s %s against %s",
            handle.battle_id,
            character.id,
            "won" if character_won else "lost",
            handle.master.name,
        )
        return ResolvedView(
            viewpoint=viewpoint, gate_status=status, character_won=character_won
        )
