class DiceRoyaleError(Exception):
    """Base class for Dice Royale errors."""


class InvalidInputError(DiceRoyaleError):
    """Raised when user input fails validation; the message is shown on re-prompt."""


class InvalidBetError(DiceRoyaleError):
    """Raised when a round is resolved with a bet outside 1..balance."""


class SessionStateError(DiceRoyaleError):
    """Raised when a session operation is invoked in the wrong state."""


class ConfigError(DiceRoyaleError):
    """Raised when a config file cannot be read or is malformed."""
