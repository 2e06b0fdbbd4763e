"""Exceptions raised by toolpath generation and its boundary helpers."""


class ToolpathError(Exception):
    """Base class for toolpath generation errors."""
    pass


class PreconditionError(ToolpathError, ValueError):
    """A generator was called with arguments that would never terminate."""
    pass


class PositioningModeError(ToolpathError):
    """Relative positioning was opened while already relative."""
    pass


class ParameterError(ToolpathError, ValueError):
    """Plan parameters could not be decoded or coerced."""
    pass
