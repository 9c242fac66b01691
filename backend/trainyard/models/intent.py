"""
Intent models for the training yard.

A player turn carries one of a closed set of intents. Actions shown to the
player carry the intent that taking them would produce, so the yard's
sub-menus are told apart by type rather than by free-form parameters.

Key concepts:
    - VisitIntent: Plain navigation to a location (the default)
    - QuestionIntent: Ask the master about your standing
    - ChallengeIntent: Fight the master

Example:
    >>> turn = PlayerTurn(
    ...     character_id="hero",
    ...     target_location_id="training_ground",
    ...     intent=QuestionIntent(),
    ... )
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class VisitIntent(BaseModel):
    """Arrive at (or look around) the target location"""

    model_config = ConfigDict(frozen=True)

    type: Literal["visit"] = "visit"


class QuestionIntent(BaseModel):
    """Ask the master how far the character is from being ready"""

    model_config = ConfigDict(frozen=True)

    type: Literal["question"] = "question"


class ChallengeIntent(BaseModel):
    """Challenge the master to a fight"""

    model_config = ConfigDict(frozen=True)

    type: Literal["challenge"] = "challenge"


Intent = Annotated[
    Union[VisitIntent, QuestionIntent, ChallengeIntent],
    Field(discriminator="type"),
]


class PlayerTurn(BaseModel):
    """Inbound player-turn event.

    Attributes:
        character_id: The acting character
        target_location_id: Location the chosen action points at
        intent: What the player wants to do there
    """

    character_id: str
    target_location_id: str
    intent: Intent = VisitIntent()
