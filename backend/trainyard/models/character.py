"""
Character state models - the per-character flags the training yard reads
"""

from pydantic import BaseModel, Field


class CharacterState(BaseModel):
    """Persistent character state relevant to the master encounter.

    Only has_engaged_today is written by the training yard, and only
    from False to True. Resetting it is the job of the daily cycle;
    level, liveness and experience belong to the combat collaborator.

    Attributes:
        id: Stable character identifier
        name: Display name
        level: Current level (1-based)
        alive: Whether the character is alive this turn
        has_engaged_today: Whether the master was already challenged today
        experience: Experience gathered towards the next level
        needed_experience: Override for the experience required this level
    """

    id: str
    name: str
    level: int = Field(default=1, ge=1)
    alive: bool = True
    has_engaged_today: bool = False
    experience: int = Field(default=0, ge=0)
    needed_experience: int | None = None

    model_config = {"validate_assignment": True}
