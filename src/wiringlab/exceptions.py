class WiringLabError(Exception):
    """Represent a base class for all wiringlab-specific failures.

    Catch this type when you want to handle any wiring failure without
    matching each concrete exception class individually.
    """


class WiringLabResourceNotFoundError(WiringLabError):
    """Signal that a wiring resource file does not exist.

    Raised while loading the wiring configuration text file or the XML
    component definitions.

    Typical fix is pointing ``WIRINGLAB_WIRING_CONFIG_PATH`` or
    ``WIRINGLAB_DEFINITIONS_PATH`` at an existing file, or leaving them unset
    to use the packaged resources.
    """


class WiringLabConfigFormatError(WiringLabError):
    """Signal a wiring configuration that does not hold two type names.

    The configuration text must contain the data source type name on the
    first line and the calculator type name on the second one.
    """


class WiringLabTypeResolutionError(WiringLabError):
    """Signal that a type name is unknown to the type registry.

    Raised by ``TypeRegistry.get`` for the dynamic strategy and for ``class``
    attributes of XML definitions.

    Typical fix is using the fully-qualified ``module.QualName`` of a type
    registered in ``build_default_registry``, or registering the type.
    """


class WiringLabConstructionError(WiringLabError):
    """Signal that a component could not be constructed.

    Raised when no constructor matches the requested parameter types or
    arguments, and when a constructor itself fails. The original exception is
    chained as ``__cause__``.
    """


class WiringLabInvalidRegistrationError(WiringLabError):
    """Signal invalid registration arguments.

    Raised by ``TypeRegistry.register`` and ``Container.add_definition`` for
    duplicate names, abstract classes, and non-class values.
    """


class WiringLabInvalidDefinitionError(WiringLabError):
    """Signal a malformed declarative definition.

    Raised by ``XmlDefinitionReader`` for unparsable XML, missing ``id`` or
    ``class`` attributes, and incomplete ``property`` or ``constructor-arg``
    elements. Raised by the container when a property cannot be injected.
    """


class WiringLabComponentNotRegisteredError(WiringLabError):
    """Signal that no component matches a name or type lookup.

    Raised by ``Container.resolve`` for unknown names, by
    ``Container.resolve_by_type`` when no candidate provides the requested
    type, and while injecting a reference to an unknown component.
    """


class WiringLabTypeMismatchError(WiringLabError):
    """Signal that a component is not an instance of the expected type.

    Raised by ``Container.resolve`` when ``of_type`` is given, and by the
    dynamic strategy when a configured type does not provide the expected
    capability.
    """


class WiringLabPrimarySelectionError(WiringLabError):
    """Signal that several candidates match a type without one clear primary.

    Typical fix is marking exactly one candidate with
    ``@component(..., primary=True)`` or ``primary="true"`` in XML, or
    removing a module from the scanned set.
    """


class WiringLabNoPrimaryError(WiringLabPrimarySelectionError):
    """Signal several candidates for a type and none of them marked primary."""


class WiringLabAmbiguousPrimaryError(WiringLabPrimarySelectionError):
    """Signal several candidates for a type with more than one marked primary."""


class WiringLabCircularDependencyError(WiringLabError):
    """Signal a component that depends on itself through its references."""


class WiringLabDataSourceNotSetError(WiringLabError):
    """Signal ``compute`` on a calculator with no data source attached.

    Typical fix is passing the data source to the constructor or calling
    ``set_data_source`` before ``compute``.
    """
