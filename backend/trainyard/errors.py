"""
Error taxonomy for the training yard core.

NotFound and NoBracketMatch signal defects in world data and are never
masked. InvariantViolation signals a request the gate should have made
impossible. A combat result for another encounter is not an error at all;
the outcome handler simply returns None for it.
"""


class TrainyardError(Exception):
    """Base class for all training yard errors"""


class NotFound(TrainyardError):
    """A referenced location, connection group or character does not exist"""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' not found")


class NoBracketMatch(TrainyardError):
    """No master bracket covers the given level"""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"No master bracket covers level {level}")


class InvariantViolation(TrainyardError):
    """A player attempted something the encounter gate does not allow"""
