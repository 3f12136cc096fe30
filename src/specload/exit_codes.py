"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specload.exceptions.SpecloadError` subclass.
Wrapping tools (code generators, CI scripts) can translate a failed load into
a process exit code without parsing the error message.

Example::

    try:
        schemas = load_sync("openapi.yaml")
    except SpecloadError as exc:
        sys.exit(exc.exit_code)   # 4 -- EXIT_NOT_FOUND if the file is missing
"""

EXIT_SUCCESS = 0
"""The load completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_TARGET = 2
"""The requested location exists but cannot be loaded (e.g. it is a directory)."""

EXIT_NOT_FOUND = 4
"""The requested location does not exist."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred, or the server returned an error status."""

EXIT_SPEC_PARSE_ERROR = 7
"""A document could not be decoded as JSON or YAML."""

EXIT_UNRESOLVABLE_REFERENCE = 8
"""A relative ``$ref`` was found in a document that has no base location."""
