"""
Action graph resolver - rebuilds a location's navigation from its connections.

Used whenever something (a fight, most notably) has replaced the player's
action set and normal navigation must be restored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trainyard.models.view import DEFAULT_GROUP, Action, ActionGroup
from trainyard.models.world import Directionality

if TYPE_CHECKING:
    from trainyard.engine.graph import ConnectionGraph

logger = logging.getLogger(__name__)


class ActionGraphResolver:
    """Builds grouped navigation actions for a location.

    Rules:
        1. The default group (no title, lowest sort key) always exists
        2. At the outgoing end of a connection the action targets the incoming
           location and lands in the connection's outgoing group
        3. At the incoming end the action targets the outgoing location and
           lands in the incoming group, unless the connection is unidirectional,
           in which case no return action is produced
        4. Named groups take their title from the location's declared
           connection group the first time they are created

    Example:
        >>> resolver = ActionGraphResolver(graph)
        >>> groups = resolver.rebuild_actions("training_ground")
        >>> [a.target_location_id for a in groups["back"].actions]
        ['village']
    """

    def __init__(self, graph: "ConnectionGraph"):
        self.graph = graph

    def rebuild_actions(self, location_id: str) -> dict[str, ActionGroup]:
        """Rebuild every navigation action for a location.

        Args:
            location_id: The location to resolve

        Returns:
            Action groups keyed by group id, default group first

        Raises:
            NotFound: If the location or a referenced connection group is missing
        """
        location = self.graph.get_location(location_id)
        groups: dict[str, ActionGroup] = {
            DEFAULT_GROUP: ActionGroup(id=DEFAULT_GROUP, title="", sort_key=0),
        }
        seen: set[tuple[str, str | None]] = set()

        for connection in self.graph.connections_of(location_id):
            if connection.outgoing == location_id:
                target_id = connection.incoming
                group_name = connection.outgoing_group
            else:
                # Incoming side of a one-way edge has no way back
                if connection.directionality == Directionality.UNIDIRECTIONAL:
                    continue
                target_id = connection.outgoing
                group_name = connection.incoming_group

            action = Action(
                target_location_id=target_id,
                title=self.graph.get_location(target_id).title,
            )
            if action.key in seen:
                continue
            seen.add(action.key)

            if group_name is None:
                groups[DEFAULT_GROUP].add_action(action)
            elif group_name in groups:
                groups[group_name].add_action(action)
            else:
                declared = location.get_connection_group(group_name)
                group = ActionGroup(id=group_name, title=declared.title, sort_key=0)
                group.add_action(action)
                groups[group_name] = group

        logger.debug(
            "Rebuilt %d action(s) in %d group(s) for %s",
            sum(len(g.actions) for g in groups.values()),
            len(groups),
            location_id,
        )
        return groups
