from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterator
from types import ModuleType
from typing import Any

from wiringlab._internal.injection_points import InjectionPointsExtractor
from wiringlab.container import Container
from wiringlab.definitions import ComponentDefinition, Constructor
from wiringlab.markers import ComponentMarker, get_component_marker

logger = logging.getLogger(__name__)

DEFAULT_SCAN_MODULES: tuple[str, ...] = (
    "wiringlab.data_source",
    "wiringlab.calculator",
    "wiringlab.extension",
)


class ComponentScanner:
    """Register ``@component`` classes declared in named modules.

    Packages are scanned recursively. A class is registered only by the
    module that declares it, so re-exports do not register it twice.
    """

    def __init__(self, container: Container) -> None:
        self._container = container
        self._extractor = InjectionPointsExtractor()

    def scan(self, *module_names: str) -> list[ComponentDefinition]:
        """Import ``module_names`` and register the components they declare.

        Args:
            module_names: Dotted names of modules or packages to scan.

        Returns:
            Definitions added to the container, in discovery order.

        """
        seen: set[type[Any]] = set()
        definitions: list[ComponentDefinition] = []
        for module in self._iter_modules(module_names):
            for _, cls in inspect.getmembers(module, inspect.isclass):
                if cls in seen or cls.__module__ != module.__name__:
                    continue
                marker = get_component_marker(cls)
                if marker is None:
                    continue
                seen.add(cls)
                definition = self._build_definition(cls, marker)
                self._container.add_definition(definition)
                definitions.append(definition)
        logger.debug("Scanned %s: %d component(s)", ", ".join(module_names), len(definitions))
        return definitions

    def _iter_modules(self, module_names: tuple[str, ...]) -> Iterator[ModuleType]:
        for module_name in module_names:
            module = importlib.import_module(module_name)
            yield module
            if hasattr(module, "__path__"):
                for info in pkgutil.walk_packages(module.__path__, prefix=f"{module.__name__}."):
                    if info.name.rpartition(".")[2] == "__main__":
                        continue
                    yield importlib.import_module(info.name)

    def _build_definition(self, cls: type[Any], marker: ComponentMarker) -> ComponentDefinition:
        return ComponentDefinition(
            name=marker.name,
            concrete_type=cls,
            constructors=(
                Constructor(factory=cls, parameters=self._extractor.extract_from_constructor(cls)),
            ),
            primary=marker.primary,
            lifetime=marker.lifetime,
            autowire=True,
            autowired_mutators=self._extractor.extract_autowired_mutators(cls),
        )


def annotation_container(*module_names: str) -> Container:
    """Build and refresh a container from the components declared in ``module_names``.

    Scans ``DEFAULT_SCAN_MODULES`` when no module is given.
    """
    container = Container()
    ComponentScanner(container).scan(*(module_names or DEFAULT_SCAN_MODULES))
    container.refresh()
    return container
