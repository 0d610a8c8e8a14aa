from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, Union, get_args, get_origin, get_type_hints

from wiringlab.definitions import InjectionPoint
from wiringlab.exceptions import WiringLabInvalidRegistrationError
from wiringlab.markers import is_autowired

_IMPLICIT_FIRST_PARAMETER_NAMES = frozenset({"self", "cls"})


@dataclass(slots=True)
class InjectionPointsExtractor:
    """Extract typed injection points from constructors and autowired mutators."""

    def extract_from_constructor(self, concrete_type: type[Any]) -> tuple[InjectionPoint, ...]:
        """Return the injection points of ``concrete_type.__init__``.

        Args:
            concrete_type: Scanned component class.

        Raises:
            WiringLabInvalidRegistrationError: If a required parameter has no
                usable class annotation.

        """
        init = concrete_type.__init__
        if init is object.__init__:
            return ()
        return self._extract(init, owner_name=concrete_type.__qualname__)

    def extract_autowired_mutators(self, concrete_type: type[Any]) -> tuple[InjectionPoint, ...]:
        """Return one injection point per ``@autowired`` method of ``concrete_type``.

        Each autowired method must accept exactly one typed argument.
        """
        mutators: list[InjectionPoint] = []
        for name, member in inspect.getmembers(concrete_type, inspect.isfunction):
            if not is_autowired(member):
                continue
            points = self._extract(member, owner_name=f"{concrete_type.__qualname__}.{name}")
            if len(points) != 1:
                msg = (
                    f"Autowired mutator '{concrete_type.__qualname__}.{name}' must accept "
                    f"exactly one argument, got {len(points)}."
                )
                raise WiringLabInvalidRegistrationError(msg)
            mutators.append(
                InjectionPoint(
                    name=name,
                    dependency_type=points[0].dependency_type,
                    required=points[0].required,
                ),
            )
        return tuple(mutators)

    def _extract(self, function: Callable[..., Any], *, owner_name: str) -> tuple[InjectionPoint, ...]:
        try:
            annotations = get_type_hints(function)
        except (AttributeError, NameError, TypeError) as error:
            msg = f"Unable to read type annotations of '{owner_name}': {error}"
            raise WiringLabInvalidRegistrationError(msg) from error

        points: list[InjectionPoint] = []
        for parameter in self._parameters(function):
            annotation = annotations.get(parameter.name, Parameter.empty)
            dependency_type, optional = self._unwrap_optional(annotation)
            required = parameter.default is Parameter.empty and not optional
            if annotation is Parameter.empty or not isinstance(dependency_type, type):
                if not required:
                    continue
                msg = (
                    f"Unable to infer dependency for required parameter '{parameter.name}' "
                    f"in '{owner_name}'. Add a class type annotation."
                )
                raise WiringLabInvalidRegistrationError(msg)
            points.append(
                InjectionPoint(
                    name=parameter.name,
                    dependency_type=dependency_type,
                    required=required,
                ),
            )
        return tuple(points)

    def _parameters(self, function: Callable[..., Any]) -> tuple[Parameter, ...]:
        parameters = tuple(
            parameter
            for parameter in inspect.signature(function).parameters.values()
            if parameter.kind not in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)
        )
        if parameters and parameters[0].name in _IMPLICIT_FIRST_PARAMETER_NAMES:
            return parameters[1:]
        return parameters

    def _unwrap_optional(self, annotation: Any) -> tuple[Any, bool]:
        if get_origin(annotation) not in (Union, types.UnionType):
            return annotation, False
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0], True
        return annotation, False
