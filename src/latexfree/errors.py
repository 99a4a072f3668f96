"""Error types shared across layers.

The api layer maps each kind to a response status; lower layers
raise them and never build responses themselves.
"""


class LatexFreeError(Exception):
    """Base class for all service errors."""


class ValidationError(LatexFreeError):
    """Missing required field or value outside an allowed set."""


class NotFoundError(LatexFreeError):
    """No submission exists with the requested ID."""


class UpstreamError(LatexFreeError):
    """External place lookup was unreachable or answered with an error."""


class PersistenceError(LatexFreeError):
    """Storage could not be read or written."""
