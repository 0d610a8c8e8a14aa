from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from wiringlab.calculator import MultiplierCalculator
from wiringlab.data_source import DatabaseDataSource, DataSource
from wiringlab.definitions import Constructor, InjectionPoint, select_constructor
from wiringlab.exceptions import (
    WiringLabConstructionError,
    WiringLabInvalidRegistrationError,
    WiringLabTypeResolutionError,
)
from wiringlab.extension import WebServiceDataSource

logger = logging.getLogger(__name__)


def qualified_name(concrete_type: type[Any]) -> str:
    """Return the ``module.QualName`` key a type is registered under."""
    return f"{concrete_type.__module__}.{concrete_type.__qualname__}"


@dataclass(frozen=True, slots=True)
class Registration:
    """Constructors available for one registered type."""

    name: str
    concrete_type: type[Any]
    constructors: tuple[Constructor, ...]

    def find_constructor(self, *parameter_types: type[Any]) -> Constructor:
        """Return the constructor declaring exactly ``parameter_types``.

        Raises:
            WiringLabConstructionError: If no constructor has that signature.

        """
        for constructor in self.constructors:
            if constructor.accepts_types(parameter_types):
                return constructor
        signature = ", ".join(t.__qualname__ for t in parameter_types)
        msg = f"No constructor {self.name}({signature}) is registered."
        raise WiringLabConstructionError(msg)

    def find_constructor_for(self, arguments: Sequence[object]) -> Constructor:
        """Return the first constructor accepting the given positional ``arguments``.

        Raises:
            WiringLabConstructionError: If no constructor accepts them.

        """
        return select_constructor(self.constructors, arguments, self.name)


class TypeRegistry:
    """Map fully-qualified type names to their constructors.

    The registry is filled once at startup and lets external configuration
    pick implementations by name without importing or introspecting types at
    runtime.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, Registration] = {}

    def register(
        self,
        concrete_type: type[Any],
        *,
        constructors: Sequence[Constructor] | None = None,
        name: str | None = None,
    ) -> Registration:
        """Register ``concrete_type`` under its qualified name or ``name``.

        Args:
            concrete_type: Instantiable class to register.
            constructors: Available constructors. Defaults to a single
                zero-argument constructor calling the class.
            name: Registration key. Defaults to ``module.QualName``.

        Raises:
            WiringLabInvalidRegistrationError: If the type is not an
                instantiable class or the name is already taken.

        """
        if not inspect.isclass(concrete_type):
            msg = f"Registered type must be a class, got {concrete_type!r}."
            raise WiringLabInvalidRegistrationError(msg)
        if inspect.isabstract(concrete_type):
            msg = f"Registered type '{concrete_type.__qualname__}' cannot be an abstract class."
            raise WiringLabInvalidRegistrationError(msg)

        key = name or qualified_name(concrete_type)
        if key in self._registrations:
            msg = f"Type name '{key}' is already registered."
            raise WiringLabInvalidRegistrationError(msg)

        registration = Registration(
            name=key,
            concrete_type=concrete_type,
            constructors=tuple(constructors) if constructors else (Constructor(factory=concrete_type),),
        )
        self._registrations[key] = registration
        logger.debug("Registered type '%s' with %d constructor(s)", key, len(registration.constructors))
        return registration

    def get(self, name: str) -> Registration:
        """Return the registration for ``name``.

        Raises:
            WiringLabTypeResolutionError: If ``name`` is not registered.

        """
        try:
            return self._registrations[name]
        except KeyError:
            msg = f"Unknown type name '{name}'."
            raise WiringLabTypeResolutionError(msg) from None

    def names(self) -> list[str]:
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __iter__(self) -> Iterator[Registration]:
        return iter(self._registrations.values())

    def __len__(self) -> int:
        return len(self._registrations)


def build_default_registry() -> TypeRegistry:
    """Return a registry holding every data source and calculator of the lab."""
    registry = TypeRegistry()
    registry.register(DatabaseDataSource)
    registry.register(WebServiceDataSource)
    registry.register(
        MultiplierCalculator,
        constructors=(
            Constructor(
                factory=lambda data_source: MultiplierCalculator(data_source),
                parameters=(InjectionPoint(name="data_source", dependency_type=DataSource),),
            ),
            Constructor(factory=lambda: MultiplierCalculator()),
        ),
    )
    return registry
