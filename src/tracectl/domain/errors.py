"""Exception hierarchy for tracectl.

Domain and infrastructure code raises these; the service layer turns
them into :class:`~tracectl.services.result.ServiceError` payloads.
"""

from __future__ import annotations


class TracectlError(Exception):
    """Base class for all tracectl failures."""

    code = "ERROR"


class ResourceFileError(TracectlError):
    """A resource file could not be read."""

    code = "FILE_ERROR"


class ResourceDecodeError(TracectlError):
    """Input is not valid JSON/YAML for the resource schema."""

    code = "DECODE_ERROR"


class ResourceTypeError(TracectlError):
    """Input describes a different resource kind than expected."""

    code = "WRONG_RESOURCE_TYPE"

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Expected resource of type '{expected}', got '{actual}'")
        self.expected = expected
        self.actual = actual


class UnknownResourceError(TracectlError):
    """No formatter is registered under the requested name."""

    code = "UNKNOWN_RESOURCE"

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown resource '{name}' (expected one of: {', '.join(known)})")
        self.name = name
        self.known = known
