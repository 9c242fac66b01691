"""Pydantic models for the training yard"""

from trainyard.models.world import (
    Connection,
    ConnectionGroup,
    Directionality,
    Location,
    Master,
    World,
    WorldData,
)
from trainyard.models.character import CharacterState
from trainyard.models.intent import (
    ChallengeIntent,
    Intent,
    PlayerTurn,
    QuestionIntent,
    VisitIntent,
)
from trainyard.models.view import DEFAULT_GROUP, Action, ActionGroup, Viewpoint
from trainyard.models.encounter import (
    TRAINING_CONTEXT,
    CombatHandle,
    CombatRequest,
    CombatResult,
    GateStatus,
    ResolvedView,
)

__all__ = [
    # World models
    "Connection",
    "ConnectionGroup",
    "Directionality",
    "Location",
    "Master",
    "World",
    "WorldData",
    # Character models
    "CharacterState",
    # Intent models
    "ChallengeIntent",
    "Intent",
    "PlayerTurn",
    "QuestionIntent",
    "VisitIntent",
    # View models
    "DEFAULT_GROUP",
    "Action",
    "ActionGroup",
    "Viewpoint",
    # Encounter models
    "TRAINING_CONTEXT",
    "CombatHandle",
    "CombatRequest",
    "CombatResult",
    "GateStatus",
    "ResolvedView",
]
