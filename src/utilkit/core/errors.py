"""Exception base shared by the utilities."""


class UtilKitError(Exception):
    """Base class for errors raised by utilkit."""

    pass
