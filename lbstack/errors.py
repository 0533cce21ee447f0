"""Errors raised while defining the stack.

Every error here aborts the Pulumi program; none of them is caught by the
definition code.
"""

from __future__ import annotations

from typing import Any


class StackDefinitionError(Exception):
    """Base class for failures during the definition pass."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(StackDefinitionError):
    """A required value is absent or invalid."""

    def __init__(self, field: str, message: str | None = None, value: Any = None) -> None:
        msg = message or f"Invalid configuration for '{field}': {value!r}"
        super().__init__(msg, details={"field": field, "value": value})
        self.field = field


class PolicyDocumentError(StackDefinitionError):
    """A policy document could not be read or parsed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}", details={"path": path})
        self.path = path


class UpstreamResolutionError(StackDefinitionError):
    """A deferred value produced by another resource resolved to nothing."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            f"Expected '{resource}' to resolve to a value, but it resolved to None",
            details={"resource": resource},
        )
        self.resource = resource
