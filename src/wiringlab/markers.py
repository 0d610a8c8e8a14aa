from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, NamedTuple, TypeVar

from wiringlab.definitions import Lifetime

C = TypeVar("C", bound=type[Any])
F = TypeVar("F", bound=Callable[..., Any])

_COMPONENT_MARKER_ATTR = "__wiringlab_component__"
_AUTOWIRED_MARKER_ATTR = "__wiringlab_autowired__"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class ComponentMarker(NamedTuple):
    """Component metadata attached to a class by ``@component``."""

    name: str
    primary: bool
    lifetime: Lifetime


def component(
    name: str | None = None,
    *,
    primary: bool = False,
    lifetime: Lifetime = Lifetime.SINGLETON,
) -> Callable[[C], C]:
    """Declare a class as a component discoverable by ``ComponentScanner``.

    Declaring a class does not register it anywhere; a scan of the module
    that defines it does.

    Args:
        name: Component name used for lookup. Defaults to the snake_case
            class name.
        primary: Prefer this component when several scanned components
            provide the same type.
        lifetime: Caching behavior of the created component.

    Examples:
        .. code-block:: python

            @component("mail_sender", primary=True)
            class SmtpMailSender(MailSender): ...

    """

    def decorator(cls: C) -> C:
        marker = ComponentMarker(
            name=name or default_component_name(cls),
            primary=primary,
            lifetime=lifetime,
        )
        setattr(cls, _COMPONENT_MARKER_ATTR, marker)
        return cls

    return decorator


def autowired(method: F) -> F:
    """Mark a single-argument mutator for by-type injection after construction."""
    setattr(method, _AUTOWIRED_MARKER_ATTR, True)
    return method


def get_component_marker(cls: type[Any]) -> ComponentMarker | None:
    """Return the marker declared on ``cls`` itself, ignoring inherited ones."""
    return cls.__dict__.get(_COMPONENT_MARKER_ATTR)


def is_autowired(member: object) -> bool:
    return getattr(member, _AUTOWIRED_MARKER_ATTR, False) is True


def default_component_name(cls: type[Any]) -> str:
    return _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()
