"""Exception hierarchy for short_ids."""


class ShortIdError(Exception):
    """Library base exception."""


class InvalidArgumentError(ShortIdError, ValueError):
    """Size or length is negative, non-integer, or otherwise unusable."""


class RandomSourceUnavailableError(ShortIdError):
    """The secure random source could not produce entropy."""
