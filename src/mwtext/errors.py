"""Exception types raised by mwtext.

Malformed wiki content never raises: unparseable titles come back as ``None``
and unresolvable link targets are skipped. The errors below signal caller
bugs (a missing or broken namespace registry) and must not be retried.
"""

from __future__ import annotations


class MWTextError(Exception):
    """Base class for all mwtext errors."""


class RegistryNotLoadedError(MWTextError):
    """A title was parsed before any namespace registry was supplied."""


class RegistryAlreadyLoadedError(MWTextError):
    """The process-wide default registry was installed twice."""


class RegistryConfigError(MWTextError):
    """Site metadata is missing, malformed, or has an unusable character class."""


class InvalidTitleError(MWTextError, ValueError):
    """Raised by :func:`mwtext.title.require_title` for text that is not a valid title."""
