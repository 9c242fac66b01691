"""
View models - what the presentation layer receives after a turn.

A Viewpoint is replaced wholesale every turn: title, ordered description
paragraphs and the grouped actions the player may take next.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from trainyard.models.intent import Intent

DEFAULT_GROUP = "default"


class Action(BaseModel):
    """A navigable choice.

    Attributes:
        target_location_id: Location the action leads to
        title: Label shown to the player (empty for plain navigation)
        intent: Sub-action at the target, None for plain navigation
    """

    target_location_id: str
    title: str = ""
    intent: Intent | None = None

    @property
    def key(self) -> tuple[str, str | None]:
        """Identity used to keep a group free of duplicates"""
        return (self.target_location_id, self.intent.type if self.intent else None)


class ActionGroup(BaseModel):
    """Ordered bucket of actions shown together"""

    id: str
    title: str = ""
    sort_key: int = 0
    actions: list[Action] = Field(default_factory=list)

    def add_action(self, action: Action) -> None:
        self.actions.append(action)


class Viewpoint(BaseModel):
    """Everything the player sees for the current turn"""

    location_id: str
    title: str
    description: list[str] = Field(default_factory=list)
    action_groups: dict[str, ActionGroup] = Field(default_factory=dict)

    def set_description(self, *paragraphs: str) -> None:
        self.description = list(paragraphs)

    def add_paragraph(self, paragraph: str) -> None:
        self.description.append(paragraph)

    def has_action_group(self, group_id: str) -> bool:
        return group_id in self.action_groups

    def add_action_group(self, group: ActionGroup) -> None:
        self.action_groups[group.id] = group

    def add_action_to_group(self, action: Action, group_id: str) -> None:
        self.action_groups[group_id].add_action(action)

    def clear_actions(self) -> None:
        self.action_groups = {}

    def all_actions(self) -> list[Action]:
        """Flatten every group's actions, groups in order"""
        return [a for group in self.action_groups.values() for a in group.actions]

    def find_action(
        self, group_id: str, *, title: str | None = None, target: str | None = None
    ) -> Action | None:
        """Find the first action in a group matching a title and/or target"""
        group = self.action_groups.get(group_id)
        if group is None:
            return None
        for action in group.actions:
            if title is not None and action.title != title:
                continue
            if target is not None and action.target_location_id != target:
                continue
            return action
        return None
