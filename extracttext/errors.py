"""Exception hierarchy for extracttext.

:class:`InvalidOptionError` is raised by the extractor to its caller, and
:class:`InvalidInputError` by the selector-file helpers.  Inside
:meth:`HTMLExtractText.extract` every other error is folded into its error
slot instead of propagating.
"""

from __future__ import annotations


class ExtractTextError(Exception):
    """Base class for every error raised by this package."""


class InvalidOptionError(ExtractTextError, TypeError):
    """Raised when the extractor is given an unknown or badly typed option."""


# ---------------------------------------------------------------------------
# Pre-flight validation (fatal to the whole extract() call)
# ---------------------------------------------------------------------------

class InvalidInputError(ExtractTextError):
    """The selector map or the HTML argument is unusable."""


class InvalidTargetError(InvalidInputError):
    """The target is a plain data value rather than an object."""


class MissingCapabilityError(InvalidTargetError):
    """The target has no one-argument method for one of the requested names.

    Attributes:
        name -- the selector-map key with no matching method
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"The object you provided does not implement the .{name}() method "
            "that you requested in the first argument",
        )
        self.name = name


# ---------------------------------------------------------------------------
# Per-selector failures (recorded, the batch carries on)
# ---------------------------------------------------------------------------

class SelectorNotFoundError(ExtractTextError):
    """A selector matched nothing while ``ignore_not_found`` is off."""

    def __init__(self, name: str) -> None:
        super().__init__("NOT FOUND")
        self.name = name


class SelectorQueryError(ExtractTextError):
    """Querying or normalizing the matches for one selector blew up."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
