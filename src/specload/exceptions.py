"""Exception hierarchy for specload.

All exceptions inherit from :class:`SpecloadError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specload.exit_codes`.
Every failure raised during a load is fatal to that load; callers catch
``SpecloadError`` once at the top and never receive a partial schema map.

Subclass hierarchy::

    SpecloadError                 (exit 1)
    +-- NotFoundError             (exit 4)
    +-- InvalidTargetError        (exit 2)
    +-- TransportError            (exit 6)
    +-- SpecParseError            (exit 7)
    |   +-- UnknownFormatError    (exit 7)
    +-- UnresolvableReferenceError (exit 8)
    +-- ConfigError               (exit 1)
"""

from specload.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_TARGET,
    EXIT_NOT_FOUND,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_UNRESOLVABLE_REFERENCE,
)


class SpecloadError(Exception):
    """Base exception for all specload errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specload.exit_codes`.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class NotFoundError(SpecloadError):
    """Raised when a local schema file does not exist or cannot be read."""

    exit_code = EXIT_NOT_FOUND


class InvalidTargetError(SpecloadError):
    """Raised when a local location points at a directory instead of a file."""

    exit_code = EXIT_INVALID_TARGET


class TransportError(SpecloadError):
    """Raised on network-level failures or non-2xx responses while fetching a remote schema."""

    exit_code = EXIT_CONNECTION_ERROR


class SpecParseError(SpecloadError):
    """Raised when content declared as JSON or YAML fails to decode."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class UnknownFormatError(SpecParseError):
    """Raised when content of undeclared type is neither valid JSON nor valid YAML."""


class UnresolvableReferenceError(SpecloadError):
    """Raised when an in-memory document contains a relative cross-document ``$ref``.

    In-memory documents have no location of their own, so there is nothing to
    resolve a relative URL or path against.
    """

    exit_code = EXIT_UNRESOLVABLE_REFERENCE


class ConfigError(SpecloadError):
    """Raised for configuration problems (invalid environment values, bad option types)."""

    exit_code = EXIT_GENERIC_FAILURE
