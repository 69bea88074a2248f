"""Errors raised by the openapi-filter I/O layer.

The filtering core never raises for malformed, dangling or unresolvable
references; these errors only cover reading and writing files.
"""


class OpenAPIFilterError(Exception):
    """Base error for openapi-filter."""


class DocumentError(OpenAPIFilterError):
    """Raised when an API description document cannot be read or written."""


class SelectorsFileError(OpenAPIFilterError):
    """Raised when a selectors file cannot be read."""
