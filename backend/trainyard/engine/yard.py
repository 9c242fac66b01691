"""
Yard views - builds what the player sees at the training yard.

Every view starts from the location's own title, description and rebuilt
navigation. The gate status then decides which narrative replaces the
description and whether the master's actions are offered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trainyard.models.encounter import GateStatus
from trainyard.models.intent import ChallengeIntent, QuestionIntent
from trainyard.models.view import Action, ActionGroup, Viewpoint

if TYPE_CHECKING:
    from trainyard.engine.graph import ConnectionGraph
    from trainyard.engine.masters import EncounterSelector
    from trainyard.engine.resolver import ActionGraphResolver
    from trainyard.models.character import CharacterState

YARD_GROUP = "trainyard"
YARD_GROUP_TITLE = "The Yard"

CONFLICT_TEXT = (
    "The sound of conflict surrounds you. The clang of weapons in grisly battle "
    "inspires your warrior heart."
)
DEAD_TEXT = (
    "You are dead. How are you going to challenge your master if you cannot even "
    "survive killing enemies? Come back tomorrow."
)
ALREADY_ENGAGED_TEXT = (
    "You already challenged your master today. Is one embarrassment per day not enough?"
)
MASTER_READY_TEXT = "{master} stands ready to evaluate you."


class YardViewBuilder:
    """Assembles viewpoints for locations and the training yard overlay.

    Attributes:
        graph: Connection graph of the world
        resolver: Rebuilds navigation actions
        selector: Picks the master for the character's level
        training_location_id: Location the master encounter lives at
    """

    def __init__(
        self,
        graph: "ConnectionGraph",
        resolver: "ActionGraphResolver",
        selector: "EncounterSelector",
        training_location_id: str,
    ):
        self.graph = graph
        self.resolver = resolver
        self.selector = selector
        self.training_location_id = training_location_id

    def build_view(self, location_id: str) -> Viewpoint:
        """Plain view of a location with its full navigation"""
        location = self.graph.get_location(location_id)
        return Viewpoint(
            location_id=location.id,
            title=location.title,
            description=location.paragraphs(),
            action_groups=self.resolver.rebuild_actions(location.id),
        )

    def gate_paragraphs(
        self, character: "CharacterState", status: GateStatus
    ) -> list[str] | None:
        """Narrative for the main yard, None to keep the location's own text.

        Too-experienced characters see the location description untouched;
        it is written for those who have outgrown the yard.
        """
        if status == GateStatus.INELIGIBLE_DEAD:
            return [DEAD_TEXT]
        if status == GateStatus.INELIGIBLE_TOO_EXPERIENCED:
            return None
        if status == GateStatus.INELIGIBLE_ALREADY_ENGAGED:
            return [CONFLICT_TEXT, ALREADY_ENGAGED_TEXT]

        master = self.selector.select_master(character.level)
        return [CONFLICT_TEXT, MASTER_READY_TEXT.format(master=master.name)]

    def apply_gate(
        self,
        viewpoint: Viewpoint,
        character: "CharacterState",
        status: GateStatus,
        *,
        append: bool = False,
        navigation: bool = True,
    ) -> None:
        """Overlay the main yard narrative and, when eligible, the master's actions.

        Args:
            viewpoint: View of the training location to modify
            character: The visiting character
            status: Gate status evaluated for the character
            append: Add the narrative after existing paragraphs instead of
                replacing the description
            navigation: Offer the master's actions when eligible
        """
        if viewpoint.location_id != self.training_location_id:
            return

        paragraphs = self.gate_paragraphs(character, status)
        if paragraphs is not None:
            if append:
                viewpoint.description.extend(paragraphs)
            else:
                viewpoint.set_description(*paragraphs)

        if navigation and status == GateStatus.ELIGIBLE:
            self.add_yard_navigation(viewpoint)

    def add_yard_navigation(self, viewpoint: Viewpoint) -> None:
        """Offer the Question and Challenge actions in the yard group"""
        actions = [
            Action(
                target_location_id=self.training_location_id,
                title="Question Master",
                intent=QuestionIntent(),
            ),
            Action(
                target_location_id=self.training_location_id,
                title="Challenge Master",
                intent=ChallengeIntent(),
            ),
        ]

        if viewpoint.has_action_group(YARD_GROUP):
            for action in actions:
                viewpoint.add_action_to_group(action, YARD_GROUP)
        else:
            viewpoint.add_action_group(
                ActionGroup(id=YARD_GROUP, title=YARD_GROUP_TITLE, sort_key=0, actions=actions)
            )
