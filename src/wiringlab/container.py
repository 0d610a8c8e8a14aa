from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

from wiringlab.definitions import ComponentDefinition, InjectionPoint, Lifetime, select_constructor
from wiringlab.exceptions import (
    WiringLabAmbiguousPrimaryError,
    WiringLabCircularDependencyError,
    WiringLabComponentNotRegisteredError,
    WiringLabConstructionError,
    WiringLabInvalidDefinitionError,
    WiringLabInvalidRegistrationError,
    WiringLabNoPrimaryError,
    WiringLabTypeMismatchError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)
_SKIPPED = object()


class Container:
    """Create, wire, and look up named components.

    Components are described by ``ComponentDefinition`` objects, read from XML
    by ``XmlDefinitionReader`` or discovered by ``ComponentScanner``. Explicit
    references are resolved by component name; autowired dependencies are
    resolved by type, where several candidates of one type need exactly one
    ``primary`` among them.

    Call ``refresh`` once all definitions are added: it validates every
    reference and by-type selection and eagerly creates singletons, so
    configuration errors surface at startup rather than at first lookup.

    Examples:
        .. code-block:: python

            container = Container()
            container.add_definition(definition)
            container.refresh()

            calculator = container.resolve("calculator", of_type=Calculator)

    """

    def __init__(self) -> None:
        self._definitions: dict[str, ComponentDefinition] = {}
        self._singletons: dict[str, Any] = {}
        self._resolution_stack: list[str] = []

    # region Registration Methods
    def add_definition(self, definition: ComponentDefinition) -> None:
        """Add a component definition.

        Args:
            definition: Definition to add. Its name must be unique.

        Raises:
            WiringLabInvalidRegistrationError: If a definition with the same
                name is already present.

        """
        if definition.name in self._definitions:
            msg = f"Component name '{definition.name}' is already registered."
            raise WiringLabInvalidRegistrationError(msg)
        self._definitions[definition.name] = definition
        logger.debug(
            "Added component '%s' of type '%s' (primary=%s, lifetime=%s)",
            definition.name,
            definition.concrete_type.__qualname__,
            definition.primary,
            definition.lifetime.name,
        )

    def get_definition(self, name: str) -> ComponentDefinition:
        """Return the definition registered under ``name``.

        Raises:
            WiringLabComponentNotRegisteredError: If ``name`` is unknown.

        """
        try:
            return self._definitions[name]
        except KeyError:
            msg = f"No component named '{name}' is registered."
            raise WiringLabComponentNotRegisteredError(msg) from None

    def names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    # endregion Registration Methods

    def refresh(self) -> None:
        """Validate all definitions and eagerly create singleton components.

        Raises:
            WiringLabComponentNotRegisteredError: If a reference or a required
                by-type dependency has no matching component.
            WiringLabPrimarySelectionError: If a by-type dependency has several
                candidates without exactly one primary.
            WiringLabConstructionError: If a singleton cannot be constructed.

        """
        for definition in self._definitions.values():
            self._validate(definition)
        for definition in self._definitions.values():
            if definition.lifetime is Lifetime.SINGLETON:
                self._get_or_create(definition)
        logger.info(
            "Container refreshed: %d component(s), %d singleton(s) created",
            len(self._definitions),
            len(self._singletons),
        )

    # region Resolution Methods
    @overload
    def resolve(self, name: str) -> Any: ...

    @overload
    def resolve(self, name: str, of_type: type[T]) -> T: ...

    def resolve(self, name: str, of_type: type[Any] | None = None) -> Any:
        """Return the component registered under ``name``.

        Args:
            name: Component name.
            of_type: Optional type the component must be an instance of.

        Raises:
            WiringLabComponentNotRegisteredError: If ``name`` is unknown.
            WiringLabTypeMismatchError: If the component is not an ``of_type``.

        """
        instance = self._get_or_create(self.get_definition(name))
        if of_type is not None and not isinstance(instance, of_type):
            msg = (
                f"Component '{name}' is a '{type(instance).__qualname__}', "
                f"expected '{of_type.__qualname__}'."
            )
            raise WiringLabTypeMismatchError(msg)
        return instance

    def resolve_by_type(self, dependency_type: type[T]) -> T:
        """Return the single, or primary, component providing ``dependency_type``.

        Raises:
            WiringLabComponentNotRegisteredError: If no component provides the type.
            WiringLabNoPrimaryError: If several components provide it and none
                is primary.
            WiringLabAmbiguousPrimaryError: If several components provide it and
                more than one is primary.

        """
        return self._get_or_create(self._select_definition(dependency_type))

    # endregion Resolution Methods

    def _candidates(self, dependency_type: type[Any]) -> list[ComponentDefinition]:
        return [
            definition
            for definition in self._definitions.values()
            if definition.provides(dependency_type)
        ]

    def _select_definition(self, dependency_type: type[Any]) -> ComponentDefinition:
        candidates = self._candidates(dependency_type)
        if not candidates:
            msg = f"No component provides type '{dependency_type.__qualname__}'."
            raise WiringLabComponentNotRegisteredError(msg)
        if len(candidates) == 1:
            return candidates[0]

        primaries = [candidate for candidate in candidates if candidate.primary]
        if len(primaries) == 1:
            logger.debug(
                "Selected primary component '%s' for type '%s'",
                primaries[0].name,
                dependency_type.__qualname__,
            )
            return primaries[0]

        names = ", ".join(f"'{candidate.name}'" for candidate in candidates)
        if not primaries:
            msg = (
                f"Type '{dependency_type.__qualname__}' has {len(candidates)} candidate "
                f"components ({names}) and none is marked primary."
            )
            raise WiringLabNoPrimaryError(msg)
        primary_names = ", ".join(f"'{primary.name}'" for primary in primaries)
        msg = (
            f"Type '{dependency_type.__qualname__}' has {len(primaries)} components "
            f"marked primary ({primary_names}); exactly one is allowed."
        )
        raise WiringLabAmbiguousPrimaryError(msg)

    def _validate(self, definition: ComponentDefinition) -> None:
        for reference in (*definition.constructor_refs, *definition.property_refs.values()):
            self.get_definition(reference)
        if not definition.autowire:
            return
        constructor_points = definition.constructors[0].parameters if definition.constructors else ()
        for point in (*constructor_points, *definition.autowired_mutators):
            if point.required or self._candidates(point.dependency_type):
                self._select_definition(point.dependency_type)

    def _get_or_create(self, definition: ComponentDefinition) -> Any:
        if definition.lifetime is Lifetime.SINGLETON and definition.name in self._singletons:
            return self._singletons[definition.name]

        if definition.name in self._resolution_stack:
            chain = " -> ".join([*self._resolution_stack, definition.name])
            msg = f"Circular dependency detected: {chain}."
            raise WiringLabCircularDependencyError(msg)

        self._resolution_stack.append(definition.name)
        try:
            instance = self._create(definition)
        finally:
            self._resolution_stack.pop()

        if definition.lifetime is Lifetime.SINGLETON:
            self._singletons[definition.name] = instance
        return instance

    def _create(self, definition: ComponentDefinition) -> Any:
        instance = self._construct(definition)

        for property_name, reference in definition.property_refs.items():
            self._inject_property(instance, property_name, self.resolve(reference))

        for mutator in definition.autowired_mutators:
            dependency = self._resolve_injection_point(mutator)
            if dependency is not _SKIPPED:
                getattr(instance, mutator.name)(dependency)
                logger.debug("Injected '%s' through mutator '%s'", definition.name, mutator.name)

        logger.debug(
            "Created component '%s' of type '%s'",
            definition.name,
            definition.concrete_type.__qualname__,
        )
        return instance

    def _construct(self, definition: ComponentDefinition) -> Any:
        if definition.constructor_refs:
            arguments = [self.resolve(reference) for reference in definition.constructor_refs]
            constructor = select_constructor(definition.constructors, arguments, definition.name)
            return constructor.create(*arguments)

        if definition.autowire and definition.constructors:
            constructor = definition.constructors[0]
            kwargs: dict[str, Any] = {}
            for parameter in constructor.parameters:
                dependency = self._resolve_injection_point(parameter)
                if dependency is not _SKIPPED:
                    kwargs[parameter.name] = dependency
            return constructor.create(**kwargs)

        constructor = definition.default_constructor()
        if constructor is None:
            msg = f"Component '{definition.name}' has no zero-argument constructor."
            raise WiringLabConstructionError(msg)
        return constructor.create()

    def _resolve_injection_point(self, point: InjectionPoint) -> Any:
        if not point.required and not self._candidates(point.dependency_type):
            return _SKIPPED
        return self.resolve_by_type(point.dependency_type)

    def _inject_property(self, instance: Any, property_name: str, value: Any) -> None:
        mutator = getattr(instance, f"set_{property_name}", None)
        if callable(mutator):
            mutator(value)
            return

        attribute = getattr(type(instance), property_name, None)
        if isinstance(attribute, property) and attribute.fset is not None:
            setattr(instance, property_name, value)
            return

        msg = (
            f"Type '{type(instance).__qualname__}' has no mutator 'set_{property_name}' "
            f"or settable property '{property_name}'."
        )
        raise WiringLabInvalidDefinitionError(msg)
