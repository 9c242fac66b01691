"""
Experience rules shared with the combat collaborator.

The combat engine owns a character's experience; the yard only reads it to
tell the character how far they are from being ready for their master.
"""

from trainyard.models.character import CharacterState

# Experience needed to complete each level, index 0 is level 1
EXPERIENCE_TABLE = (
    100, 400, 1002, 1912, 3140,
    4707, 6641, 8985, 11795, 15143,
    19121, 23840, 29437, 36071, 43930,
)


def needed_experience_by_level(level: int) -> int:
    """Experience required to complete a level, capped at the last table entry"""
    index = min(max(level, 1), len(EXPERIENCE_TABLE)) - 1
    return EXPERIENCE_TABLE[index]


def needed_experience(character: CharacterState) -> int:
    """Experience the character needs this level, honouring any override"""
    if character.needed_experience is not None:
        return character.needed_experience
    return needed_experience_by_level(character.level)


def has_needed_experience(character: CharacterState) -> bool:
    return character.experience >= needed_experience(character)


def remaining_experience(character: CharacterState) -> int:
    return max(needed_experience(character) - character.experience, 0)
