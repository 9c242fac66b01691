"""
Character state management for the training yard.

Characters are owned by the host game; the manager is the one place the
yard reads them from and the one place it writes its single flag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trainyard.errors import NotFound
from trainyard.models.character import CharacterState

logger = logging.getLogger(__name__)


class CharacterStateManager:
    """Holds the characters the yard may act on.

    Example:
        >>> manager = CharacterStateManager([CharacterState(id="hero", name="Hero")])
        >>> manager.mark_engaged("hero")
        >>> manager.get_character("hero").has_engaged_today
        True
    """

    def __init__(self, characters: Iterable[CharacterState] = ()):
        self._characters: dict[str, CharacterState] = {c.id: c for c in characters}

    def add_character(self, character: CharacterState) -> None:
        """Register (or replace) a character"""
        self._characters[character.id] = character

    def get_character(self, character_id: str) -> CharacterState:
        """Get a character by ID.

        Raises:
            NotFound: If the character is unknown
        """
        character = self._characters.get(character_id)
        if character is None:
            raise NotFound("character", character_id)
        return character

    def mark_engaged(self, character_id: str) -> None:
        """Record that the character faced their master today.

        The flag only ever goes from False to True here; clearing it is
        left to the daily cycle.
        """
        character = self.get_character(character_id)
        if not character.has_engaged_today:
            character.has_engaged_today = True
            logger.info("Character %s has engaged their master today", character_id)
