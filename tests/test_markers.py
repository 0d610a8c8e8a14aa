import pytest

from wiringlab._internal.injection_points import InjectionPointsExtractor
from wiringlab.definitions import Lifetime
from wiringlab.exceptions import WiringLabInvalidRegistrationError
from wiringlab.markers import ComponentMarker, autowired, component, default_component_name, get_component_marker


@pytest.mark.parametrize(
    ("class_name", "expected"),
    [
        ("Calculator", "calculator"),
        ("DatabaseDataSource", "database_data_source"),
        ("HTTPDataSource", "http_data_source"),
        ("Source2", "source2"),
    ],
)
def test_default_component_name(class_name: str, expected: str) -> None:
    assert default_component_name(type(class_name, (), {})) == expected


def test_component_attaches_marker() -> None:
    @component("named", primary=True, lifetime=Lifetime.PROTOTYPE)
    class Named:
        pass

    assert get_component_marker(Named) == ComponentMarker(name="named", primary=True, lifetime=Lifetime.PROTOTYPE)


def test_marker_is_not_inherited() -> None:
    @component()
    class Base:
        pass

    class Child(Base):
        pass

    assert get_component_marker(Base) == ComponentMarker(name="base", primary=False, lifetime=Lifetime.SINGLETON)
    assert get_component_marker(Child) is None


def test_autowired_mutator_must_take_one_argument() -> None:
    class Broken:
        @autowired
        def configure(self, first: int, second: str) -> None: ...

    with pytest.raises(WiringLabInvalidRegistrationError, match="exactly one argument, got 2"):
        InjectionPointsExtractor().extract_autowired_mutators(Broken)


def test_unannotated_required_parameter_is_rejected() -> None:
    class Unannotated:
        def __init__(self, dependency) -> None:  # noqa: ANN001
            self.dependency = dependency

    with pytest.raises(WiringLabInvalidRegistrationError, match="required parameter 'dependency'"):
        InjectionPointsExtractor().extract_from_constructor(Unannotated)


def test_unannotated_optional_parameter_is_ignored() -> None:
    class WithDefault:
        def __init__(self, dependency=None) -> None:  # noqa: ANN001
            self.dependency = dependency

    assert InjectionPointsExtractor().extract_from_constructor(WithDefault) == ()
