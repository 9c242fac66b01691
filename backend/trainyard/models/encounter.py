"""
Encounter models - gate status and the combat engine hand-off.

Combat itself is run by an external engine. The training yard only sees
two discrete moments: the CombatRequest it sends when a fight starts and
the CombatResult that comes back once the fight is over.

Example:
    >>> handle = CombatHandle(
    ...     battle_id="battle-1",
    ...     context_tag=TRAINING_CONTEXT,
    ...     character_id="hero",
    ...     master=master,
    ...     origin_location_id="training_ground",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from trainyard.models.view import Viewpoint
from trainyard.models.world import Master

# Tags every combat started by the yard, so results of unrelated fights pass through
TRAINING_CONTEXT = "trainyard/battle/master"


class GateStatus(str, Enum):
    """Whether a character may engage the master this cycle.

    Evaluated in declaration order; the first matching condition wins.
    """

    INELIGIBLE_DEAD = "ineligible_dead"
    INELIGIBLE_TOO_EXPERIENCED = "ineligible_too_experienced"
    INELIGIBLE_ALREADY_ENGAGED = "ineligible_already_engaged"
    ELIGIBLE = "eligible"


class CombatRequest(BaseModel):
    """Outbound "start combat" call to the combat engine"""

    attacker_id: str
    defender: Master
    context_tag: str
    origin_location_id: str


class CombatHandle(BaseModel):
    """A fight the yard has started and is waiting on.

    Attributes:
        battle_id: Identifier assigned by the combat engine
        context_tag: Tag the concluding result must carry
        character_id: The challenging character
        master: The opponent selected for the character's level
        origin_location_id: Where the fight was started from
    """

    battle_id: str
    context_tag: str
    character_id: str
    master: Master
    origin_location_id: str


class CombatResult(BaseModel):
    """Inbound "combat concluded" event from the combat engine"""

    context_tag: str
    winner_id: str
    loser_id: str
    referrer_location_id: str


class ResolvedView(BaseModel):
    """View restored after a master fight concluded"""

    viewpoint: Viewpoint
    gate_status: GateStatus
    character_won: bool
