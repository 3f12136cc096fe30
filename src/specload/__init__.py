"""specload -- load an API description and every document its ``$ref`` pointers reach.

This package is the front end of a document-to-code generation pipeline. Given
a root OpenAPI/JSON Schema document (JSON or YAML, local file, remote URL, or
an already-decoded value) it fetches every referenced document exactly once,
collects them into a single schema map, and rewrites each ``$ref`` into a
namespaced form that a code emitter can use directly.

Typical usage::

    from specload import load_sync

    schemas = load_sync("specs/openapi.yaml")
    # {"file:///.../openapi.yaml": {...}, "schemas/pet.yaml": {...}}

Modules:
    parser: Locating, fetching, decoding, scanning and transforming documents.
    models: Pydantic models and type aliases shared across the package.
    config: Environment-aware resolution of load options.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stderr diagnostics with Rich support.
"""

__version__ = "0.1.0"

from specload.exceptions import SpecloadError  # noqa: E402
from specload.models import LoadOptions, Location, LocationKind  # noqa: E402
from specload.parser import load, load_sync  # noqa: E402

__all__ = [
    "__version__",
    "Location",
    "LocationKind",
    "LoadOptions",
    "SpecloadError",
    "load",
    "load_sync",
]
