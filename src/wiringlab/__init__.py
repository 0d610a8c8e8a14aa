from wiringlab.calculator import Calculator, MultiplierCalculator
from wiringlab.container import Container
from wiringlab.data_source import DatabaseDataSource, DataSource
from wiringlab.definitions import ComponentDefinition, Constructor, InjectionPoint, Lifetime
from wiringlab.exceptions import (
    WiringLabAmbiguousPrimaryError,
    WiringLabCircularDependencyError,
    WiringLabComponentNotRegisteredError,
    WiringLabConfigFormatError,
    WiringLabConstructionError,
    WiringLabDataSourceNotSetError,
    WiringLabError,
    WiringLabInvalidDefinitionError,
    WiringLabInvalidRegistrationError,
    WiringLabNoPrimaryError,
    WiringLabPrimarySelectionError,
    WiringLabResourceNotFoundError,
    WiringLabTypeMismatchError,
    WiringLabTypeResolutionError,
)
from wiringlab.extension import WebServiceDataSource
from wiringlab.markers import autowired, component
from wiringlab.registry import Registration, TypeRegistry, build_default_registry
from wiringlab.scanning import ComponentScanner, annotation_container
from wiringlab.wiring_config import WiringConfiguration, load_wiring_configuration
from wiringlab.xml_definitions import XmlDefinitionReader, xml_container

__all__ = [
    "Calculator",
    "ComponentDefinition",
    "ComponentScanner",
    "Constructor",
    "Container",
    "DataSource",
    "DatabaseDataSource",
    "InjectionPoint",
    "Lifetime",
    "MultiplierCalculator",
    "Registration",
    "TypeRegistry",
    "WebServiceDataSource",
    "WiringConfiguration",
    "WiringLabAmbiguousPrimaryError",
    "WiringLabCircularDependencyError",
    "WiringLabComponentNotRegisteredError",
    "WiringLabConfigFormatError",
    "WiringLabConstructionError",
    "WiringLabDataSourceNotSetError",
    "WiringLabError",
    "WiringLabInvalidDefinitionError",
    "WiringLabInvalidRegistrationError",
    "WiringLabNoPrimaryError",
    "WiringLabPrimarySelectionError",
    "WiringLabResourceNotFoundError",
    "WiringLabTypeMismatchError",
    "WiringLabTypeResolutionError",
    "XmlDefinitionReader",
    "annotation_container",
    "autowired",
    "build_default_registry",
    "component",
    "load_wiring_configuration",
    "xml_container",
]
