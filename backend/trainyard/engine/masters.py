"""
Master selection - maps a character level to the one master who trains it.

The bracket table is handed in at construction and checked once: brackets
must not overlap and must leave no gap over the supported level range.
A lookup outside that range is a configuration defect and raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trainyard.errors import NoBracketMatch
from trainyard.models.world import Master

logger = logging.getLogger(__name__)

MASTER_LEVEL_CEILING = 15


def bracket_errors(
    masters: Iterable[Master], max_level: int = MASTER_LEVEL_CEILING
) -> list[str]:
    """List every problem that keeps a bracket table from being total.

    Args:
        masters: The bracket table
        max_level: Highest level the table must cover

    Returns:
        Human-readable problems, empty if the table is usable
    """
    errors = []
    ordered = sorted(masters, key=lambda m: (m.min_level, m.max_level))

    for master in ordered:
        if master.min_level > master.max_level:
            errors.append(
                f"Master '{master.id}' has min_level {master.min_level} above max_level {master.max_level}"
            )

    expected = 1
    for master in ordered:
        if master.min_level > expected:
            errors.append(f"No master covers levels {expected}-{master.min_level - 1}")
        elif master.min_level < expected:
            errors.append(
                f"Master '{master.id}' overlaps levels {master.min_level}-{expected - 1}"
            )
        expected = max(expected, master.max_level + 1)

    if expected <= max_level:
        errors.append(f"No master covers levels {expected}-{max_level}")

    return errors


class MasterTable:
    """Immutable bracket table of masters"""

    def __init__(self, masters: Iterable[Master], max_level: int = MASTER_LEVEL_CEILING):
        self._masters = tuple(sorted(masters, key=lambda m: m.min_level))
        self.max_level = max_level

        errors = bracket_errors(self._masters, max_level)
        if errors:
            raise ValueError("Invalid master table:\n  - " + "\n  - ".join(errors))

    @property
    def masters(self) -> tuple[Master, ...]:
        return self._masters

    def __len__(self) -> int:
        return len(self._masters)


class EncounterSelector:
    """Selects the master a character may challenge.

    Example:
        >>> selector = EncounterSelector(MasterTable(world.masters))
        >>> selector.select_master(1).name
        'Mieraband'
    """

    def __init__(self, table: MasterTable):
        self.table = table

    def select_master(self, level: int) -> Master:
        """Get the single master whose bracket covers a level.

        Raises:
            NoBracketMatch: If no bracket covers the level
        """
        for master in self.table.masters:
            if master.covers(level):
                return master

        logger.error("No master bracket covers level %d", level)
        raise NoBracketMatch(level)
