from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from wiringlab.exceptions import WiringLabConstructionError


class Lifetime(Enum):
    """Define cache behavior for container-created components."""

    SINGLETON = auto()
    """Create the component once and share it for the container lifetime."""

    PROTOTYPE = auto()
    """Create a new component for every lookup."""


@dataclass(frozen=True, slots=True)
class InjectionPoint:
    """Describe one typed slot a dependency is injected into.

    For constructors the name is the parameter name, for autowired mutators it
    is the method name.
    """

    name: str
    dependency_type: type[Any]
    required: bool = True


@dataclass(frozen=True, slots=True)
class Constructor:
    """Pair a factory closure with the ordered types it accepts."""

    factory: Callable[..., Any]
    parameters: tuple[InjectionPoint, ...] = ()

    @property
    def parameter_types(self) -> tuple[type[Any], ...]:
        return tuple(parameter.dependency_type for parameter in self.parameters)

    def accepts_types(self, parameter_types: Sequence[type[Any]]) -> bool:
        """Return whether the constructor declares exactly ``parameter_types``."""
        return self.parameter_types == tuple(parameter_types)

    def accepts_arguments(self, arguments: Sequence[object]) -> bool:
        """Return whether positional ``arguments`` fit the declared parameters.

        Trailing optional parameters may be omitted.
        """
        if len(arguments) > len(self.parameters):
            return False
        if any(parameter.required for parameter in self.parameters[len(arguments) :]):
            return False
        return all(
            isinstance(argument, parameter.dependency_type)
            for argument, parameter in zip(arguments, self.parameters)
        )

    def create(self, *args: Any, **kwargs: Any) -> Any:
        """Call the factory and wrap any failure in ``WiringLabConstructionError``."""
        try:
            return self.factory(*args, **kwargs)
        except Exception as error:
            name = getattr(self.factory, "__qualname__", repr(self.factory))
            msg = f"Constructor '{name}' failed: {error}"
            raise WiringLabConstructionError(msg) from error


def select_constructor(constructors: Sequence[Constructor], arguments: Sequence[object], owner: str) -> Constructor:
    """Return the first of ``constructors`` accepting the positional ``arguments``.

    Raises:
        WiringLabConstructionError: If none of them accepts the arguments.

    """
    for constructor in constructors:
        if constructor.accepts_arguments(arguments):
            return constructor
    signature = ", ".join(type(argument).__qualname__ for argument in arguments)
    msg = f"No constructor of '{owner}' accepts arguments ({signature})."
    raise WiringLabConstructionError(msg)


@dataclass(kw_only=True)
class ComponentDefinition:
    """Describe how a container creates and wires one named component.

    A definition comes either from an XML ``bean`` element, with explicit
    references to other components by name, or from a ``@component`` class
    found by scanning, in which case dependencies are autowired by type.
    """

    name: str
    """Unique component name used for lookup."""
    concrete_type: type[Any]
    """Class of the created component; used for lookup by type."""
    constructors: tuple[Constructor, ...]
    """Available constructors, most specific first."""
    primary: bool = False
    """Wins lookup by type when several components provide the same type."""
    lifetime: Lifetime = Lifetime.SINGLETON
    constructor_refs: tuple[str, ...] = ()
    """Names of components passed positionally to the constructor."""
    property_refs: dict[str, str] = field(default_factory=dict)
    """Property name to referenced component name, injected after construction."""
    autowire: bool = False
    """Resolve constructor parameters by type instead of by name."""
    autowired_mutators: tuple[InjectionPoint, ...] = ()
    """Mutator methods called with a by-type resolved argument after construction."""

    def provides(self, dependency_type: type[Any]) -> bool:
        return issubclass(self.concrete_type, dependency_type)

    def default_constructor(self) -> Constructor | None:
        return next((c for c in self.constructors if c.accepts_arguments(())), None)
