"""Helpers for values that are only known once another resource exists."""

from collections.abc import Callable
from typing import Any, TypeVar

import pulumi

from lbstack.errors import ConfigurationError, UpstreamResolutionError

T = TypeVar("T")
R = TypeVar("R")


def assert_defined(value: T | None, name: str) -> T:
    """Return ``value`` or fail the definition pass if it is ``None``.

    Falsy values such as ``""`` or ``0`` are defined and pass through.
    """
    if value is None:
        raise ConfigurationError(
            name,
            message=f"Expected '{name}' to be defined, but received {value}",
            value=value,
        )
    return value


def require_output(value: pulumi.Input[T | None], name: str) -> pulumi.Output[T]:
    """Wrap ``value`` so that resolving to ``None`` raises instead of flowing on."""

    def check(resolved: T | None) -> T:
        if resolved is None:
            raise UpstreamResolutionError(name)
        return resolved

    return pulumi.Output.from_input(value).apply(check)


def combine(fn: Callable[..., R], *values: pulumi.Input[Any]) -> pulumi.Output[R]:
    """Apply a pure function to several deferred values once all of them resolve.

    ``fn`` receives the resolved values positionally, in the order given.
    """
    return pulumi.Output.all(*values).apply(lambda args: fn(*args))
