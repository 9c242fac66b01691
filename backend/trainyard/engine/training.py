"""
Training ground scene controller.

This module is the entry point for the two inbound events the yard
handles: a player turn and a concluded master fight.

Turn flow:
    PlayerTurn -> EncounterGate.evaluate -> gated narrative
                                         -> (question) standing report
                                         -> (challenge) CombatEngine.start_combat
    CombatResult -> EncounterOutcomeHandler -> ActionGraphResolver -> ResolvedView
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from trainyard.config import get_world_id, session_logs_enabled
from trainyard.engine.experience import has_needed_experience, remaining_experience
from trainyard.engine.gate import EncounterGate
from trainyard.engine.graph import ConnectionGraph
from trainyard.engine.masters import EncounterSelector, MasterTable
from trainyard.engine.outcome import EncounterOutcomeHandler
from trainyard.engine.resolver import ActionGraphResolver
from trainyard.engine.yard import YardViewBuilder
from trainyard.errors import InvariantViolation
from trainyard.models.encounter import (
    TRAINING_CONTEXT,
    CombatHandle,
    CombatRequest,
    GateStatus,
)
from trainyard.models.intent import ChallengeIntent, QuestionIntent, VisitIntent
from trainyard.models.view import Viewpoint
from trainyard.session_logger import get_session_logger

if TYPE_CHECKING:
    from trainyard.engine.combat import CombatEngine
    from trainyard.engine.state import CharacterStateManager
    from trainyard.models.character import CharacterState
    from trainyard.models.encounter import CombatResult, ResolvedView
    from trainyard.models.intent import PlayerTurn
    from trainyard.models.world import WorldData
    from trainyard.session_logger import SessionLogger

logger = logging.getLogger(__name__)

QUESTION_TEXT = "You approach {master} timidly and inquire as to your standing in the class."
QUESTION_READY_TEXT = '{master} says, "Gee, your muscles are getting bigger than mine..."'
QUESTION_NOT_READY_TEXT = (
    "{master} states that you will need {experience} more experience before you "
    "are ready to challenge him in battle."
)
CHALLENGE_TITLE = "A fight against your master!"
CHALLENGE_TEXT = (
    "{master} quickly spins around and taunts you to attack first, sure that you "
    "will never be victorious."
)
SAFE_TEXT = "Nothing happens. Perhaps try something else."


class TrainingGround:
    """Controller for the master encounter at the training yard.

    Attributes:
        world: Loaded world data
        characters: Source of character state
        combat_engine: External engine fights are delegated to
        graph: Connection graph built from the world
        resolver: Navigation rebuilder
        selector: Master selection by level
        gate: Eligibility state machine
        views: Viewpoint builder with the yard overlay
        outcome_handler: Reconciles finished fights

    Example:
        >>> yard = TrainingGround(world, characters, combat_engine)
        >>> view = yard.handle_turn(PlayerTurn(character_id="hero",
        ...                                    target_location_id="training_ground"))
        >>> handle = yard.start_encounter("hero")
        >>> resolved = yard.resolve(handle, result)
    """

    def __init__(
        self,
        world: "WorldData",
        characters: "CharacterStateManager",
        combat_engine: "CombatEngine",
        selector: EncounterSelector | None = None,
        gate: EncounterGate | None = None,
        session_logger: "SessionLogger | None" = None,
    ):
        self.world = world
        self.characters = characters
        self.combat_engine = combat_engine
        self.session_id = str(uuid.uuid4())
        if session_logger is None and session_logs_enabled():
            session_logger = get_session_logger(self.session_id, get_world_id())
        self.session_logger = session_logger
        self.training_location_id = world.world.training_location

        self.graph = ConnectionGraph(world)
        self.resolver = ActionGraphResolver(self.graph)
        self.selector = selector or EncounterSelector(MasterTable(world.masters))
        self.gate = gate or EncounterGate()
        self.views = YardViewBuilder(
            self.graph, self.resolver, self.selector, self.training_location_id
        )
        self.outcome_handler = EncounterOutcomeHandler(characters, self.gate, self.views)

        # Fights started but not yet concluded, by character
        self.pending: dict[str, CombatHandle] = {}

        # Validates the training location exists
        self.graph.get_location(self.training_location_id)

    def build_view(self, location_id: str) -> "Viewpoint":
        """Plain view of any location with its full navigation"""
        return self.views.build_view(location_id)

    def handle_turn(self, turn: "PlayerTurn") -> "Viewpoint":
        """Process a player turn.

        Args:
            turn: The inbound player turn

        Returns:
            The view to present for this turn

        Raises:
            NotFound: If the character or a location is missing from the world
            NoBracketMatch: If the master table does not cover the character
        """
        status = None
        try:
            if turn.target_location_id != self.training_location_id:
                viewpoint = self._handle_elsewhere(turn)
            else:
                character = self.characters.get_character(turn.character_id)
                status = self.gate.evaluate(character)

                if isinstance(turn.intent, QuestionIntent):
                    viewpoint = self._handle_question(character, status)
                elif isinstance(turn.intent, ChallengeIntent):
                    viewpoint = self._handle_challenge(character, status)
                else:
                    viewpoint = self._handle_main_yard(character, status)
        except InvariantViolation as e:
            logger.error("Aborting turn for %s: %s", turn.character_id, e)
            viewpoint = self.build_view(turn.target_location_id)
            viewpoint.set_description(SAFE_TEXT)

        self._log_turn(turn, status, viewpoint)
        return viewpoint

    def start_encounter(self, character_id: str) -> CombatHandle:
        """Start the master fight for an eligible character.

        The engaged flag is left alone here; it is only set once the fight
        concludes, so a fight the engine fails to start does not count.

        Raises:
            InvariantViolation: If the gate does not allow the encounter or
                the character is already fighting
            Exception: Anything the combat engine raises while starting
        """
        character = self.characters.get_character(character_id)
        status = self.gate.evaluate(character)
        self._require_eligible(character, status, "challenge")

        master = self.selector.select_master(character.level)
        request = CombatRequest(
            attacker_id=character.id,
            defender=master,
            context_tag=TRAINING_CONTEXT,
            origin_location_id=self.training_location_id,
        )
        battle_id = self.combat_engine.start_combat(request)

        logger.info("Started master fight %s: %s vs %s", battle_id, character.id, master.name)
        handle = CombatHandle(
            battle_id=battle_id,
            context_tag=TRAINING_CONTEXT,
            character_id=character.id,
            master=master,
            origin_location_id=self.training_location_id,
        )
        self.pending[character.id] = handle
        return handle

    def resolve(
        self, handle: CombatHandle, result: "CombatResult"
    ) -> "ResolvedView | None":
        """Resolve a concluded fight; None if the result is for another fight.

        Raises:
            InvariantViolation: If the handle is not the character's pending
                fight, e.g. a fight that was already resolved
        """
        pending = self.pending.get(handle.character_id)
        if result.context_tag == handle.context_tag and pending != handle:
            raise InvariantViolation(
                f"Fight {handle.battle_id} is not pending for {handle.character_id}"
            )

        resolved = self.outcome_handler.on_combat_concluded(handle, result)
        if resolved is not None:
            self.pending.pop(handle.character_id, None)
        if self.session_logger is not None:
            self.session_logger.log_combat_concluded(
                handle, result, resolved.viewpoint if resolved else None
            )
        return resolved

    def pending_encounter(self, character_id: str) -> CombatHandle | None:
        """The fight a character is currently in, if any"""
        return self.pending.get(character_id)

    def _handle_main_yard(
        self, character: "CharacterState", status: GateStatus
    ) -> "Viewpoint":
        viewpoint = self.build_view(self.training_location_id)
        # No master actions while a fight is still running
        self.views.apply_gate(
            viewpoint, character, status, navigation=character.id not in self.pending
        )
        return viewpoint

    def _handle_elsewhere(self, turn: "PlayerTurn") -> "Viewpoint":
        if not isinstance(turn.intent, VisitIntent):
            raise InvariantViolation(
                f"Character {turn.character_id} attempted to {turn.intent.type} "
                f"at {turn.target_location_id}"
            )
        return self.build_view(turn.target_location_id)

    def _handle_question(
        self, character: "CharacterState", status: GateStatus
    ) -> "Viewpoint":
        """Report the character's standing. Read-only."""
        self._require_eligible(character, status, "question")
        master = self.selector.select_master(character.level)

        viewpoint = self.build_view(self.training_location_id)
        viewpoint.set_description(QUESTION_TEXT.format(master=master.name))

        if has_needed_experience(character):
            viewpoint.add_paragraph(QUESTION_READY_TEXT.format(master=master.name))
        else:
            viewpoint.add_paragraph(
                QUESTION_NOT_READY_TEXT.format(
                    master=master.name,
                    experience=remaining_experience(character),
                )
            )

        self.views.add_yard_navigation(viewpoint)
        return viewpoint

    def _handle_challenge(
        self, character: "CharacterState", status: GateStatus
    ) -> "Viewpoint":
        self._require_eligible(character, status, "challenge")
        handle = self.start_encounter(character.id)

        # The combat engine supplies the fight actions from here on
        return Viewpoint(
            location_id=self.training_location_id,
            title=CHALLENGE_TITLE,
            description=[CHALLENGE_TEXT.format(master=handle.master.name)],
        )

    def _require_eligible(
        self, character: "CharacterState", status: GateStatus, attempt: str
    ) -> None:
        if status != GateStatus.ELIGIBLE:
            raise InvariantViolation(
                f"Character {character.id} attempted to {attempt} while {status.value}"
            )
        if character.id in self.pending:
            raise InvariantViolation(
                f"Character {character.id} attempted to {attempt} during fight "
                f"{self.pending[character.id].battle_id}"
            )

    def _log_turn(
        self, turn: "PlayerTurn", status: GateStatus | None, viewpoint: "Viewpoint"
    ) -> None:
        if self.session_logger is not None:
            self.session_logger.log_turn(turn, status, viewpoint)
