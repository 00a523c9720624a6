"""Exception hierarchy for the poker decision helper.

Every error derives from PokerHelperError. The input-validation errors
also derive from ValueError so callers that only know about ValueError
keep working.
"""


class PokerHelperError(Exception):
    """Base class for all poker helper errors."""


class ParseError(PokerHelperError, ValueError):
    """A card token could not be parsed into a rank and suit."""


class InvalidHandError(PokerHelperError, ValueError):
    """Wrong number of hole, community, or evaluated cards."""


class InvalidGameStateError(PokerHelperError, ValueError):
    """Player count or a chip amount is outside its allowed range."""


class ConfigError(PokerHelperError, ValueError):
    """A configuration file holds an unusable value."""
