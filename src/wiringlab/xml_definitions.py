"""Read component definitions from an XML resource.

The format follows the familiar ``beans`` layout; XML namespaces are ignored,
so a namespaced root element is accepted as well:

.. code-block:: xml

    <beans>
        <bean id="data_source" class="wiringlab.data_source.DatabaseDataSource"/>
        <bean id="calculator" class="wiringlab.calculator.MultiplierCalculator">
            <property name="data_source" ref="data_source"/>
        </bean>
    </beans>

``class`` attributes are resolved through a ``TypeRegistry``, never by
importing arbitrary modules.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar

from wiringlab._internal.resources import open_text_resource
from wiringlab.container import Container
from wiringlab.definitions import ComponentDefinition, Lifetime
from wiringlab.exceptions import WiringLabInvalidDefinitionError
from wiringlab.registry import TypeRegistry, build_default_registry

V = TypeVar("V")

logger = logging.getLogger(__name__)

DEFAULT_DEFINITIONS = "beans.xml"

_BOOLEAN_VALUES = {"true": True, "false": False}
_LIFETIMES = {"singleton": Lifetime.SINGLETON, "prototype": Lifetime.PROTOTYPE}


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


class XmlDefinitionReader:
    """Turn ``bean`` elements into ``ComponentDefinition`` objects."""

    def __init__(self, registry: TypeRegistry) -> None:
        self._registry = registry

    def read(self, path: Path | None = None) -> list[ComponentDefinition]:
        """Read definitions from ``path`` or the packaged ``beans.xml``.

        Raises:
            WiringLabResourceNotFoundError: If the resource does not exist.
            WiringLabInvalidDefinitionError: If the XML is malformed.
            WiringLabTypeResolutionError: If a ``class`` is not registered.

        """
        with open_text_resource(path, DEFAULT_DEFINITIONS) as stream:
            try:
                root = ET.parse(stream).getroot()
            except (ET.ParseError, UnicodeDecodeError) as error:
                source = path if path is not None else DEFAULT_DEFINITIONS
                msg = f"Definitions '{source}' are not well-formed UTF-8 XML: {error}"
                raise WiringLabInvalidDefinitionError(msg) from error

        return self.read_element(root)

    def read_element(self, root: ET.Element) -> list[ComponentDefinition]:
        """Read definitions from an already parsed ``beans`` element."""
        if _local_name(root.tag) != "beans":
            msg = f"Root element must be 'beans', got '{_local_name(root.tag)}'."
            raise WiringLabInvalidDefinitionError(msg)

        definitions = [
            self._read_bean(element)
            for element in root
            if isinstance(element.tag, str) and _local_name(element.tag) == "bean"
        ]
        logger.debug("Read %d component definition(s)", len(definitions))
        return definitions

    def _read_bean(self, element: ET.Element) -> ComponentDefinition:
        name = self._required_attribute(element, "id")
        registration = self._registry.get(self._required_attribute(element, "class"))

        constructor_refs: list[str] = []
        property_refs: dict[str, str] = {}
        for child in element:
            if not isinstance(child.tag, str):
                continue
            tag = _local_name(child.tag)
            if tag == "constructor-arg":
                constructor_refs.append(self._required_attribute(child, "ref", owner=name))
            elif tag == "property":
                property_name = self._required_attribute(child, "name", owner=name)
                if property_name in property_refs:
                    msg = f"Bean '{name}' declares property '{property_name}' twice."
                    raise WiringLabInvalidDefinitionError(msg)
                property_refs[property_name] = self._required_attribute(child, "ref", owner=name)

        return ComponentDefinition(
            name=name,
            concrete_type=registration.concrete_type,
            constructors=registration.constructors,
            primary=self._choice(element, "primary", _BOOLEAN_VALUES, default=False, owner=name),
            lifetime=self._choice(element, "scope", _LIFETIMES, default=Lifetime.SINGLETON, owner=name),
            constructor_refs=tuple(constructor_refs),
            property_refs=property_refs,
        )

    def _required_attribute(self, element: ET.Element, attribute: str, owner: str | None = None) -> str:
        value = element.get(attribute)
        if not value:
            where = f" of bean '{owner}'" if owner else ""
            msg = f"Element '{_local_name(element.tag)}'{where} is missing the '{attribute}' attribute."
            raise WiringLabInvalidDefinitionError(msg)
        return value

    def _choice(
        self,
        element: ET.Element,
        attribute: str,
        choices: Mapping[str, V],
        *,
        default: V,
        owner: str,
    ) -> V:
        value = element.get(attribute)
        if value is None:
            return default
        try:
            return choices[value.strip().lower()]
        except KeyError:
            allowed = ", ".join(f"'{choice}'" for choice in choices)
            msg = f"Bean '{owner}' has invalid {attribute}='{value}'; expected one of {allowed}."
            raise WiringLabInvalidDefinitionError(msg) from None


def xml_container(path: Path | None = None, registry: TypeRegistry | None = None) -> Container:
    """Build and refresh a container from the XML definitions at ``path``.

    Args:
        path: Definitions file. ``None`` reads the packaged ``beans.xml``.
        registry: Type registry resolving ``class`` attributes. Defaults to
            ``build_default_registry()``.

    """
    reader = XmlDefinitionReader(registry if registry is not None else build_default_registry())
    container = Container()
    for definition in reader.read(path):
        container.add_definition(definition)
    container.refresh()
    return container
