import pytest

from wiringlab.calculator import MULTIPLIER, MultiplierCalculator
from wiringlab.data_source import DatabaseDataSource, DataSource
from wiringlab.exceptions import WiringLabDataSourceNotSetError
from wiringlab.extension import WebServiceDataSource


def test_database_data_source_returns_23_and_announces_itself(capsys: pytest.CaptureFixture[str]) -> None:
    assert DatabaseDataSource().fetch_value() == 23.0
    assert capsys.readouterr().out == "Database version!\n"


def test_web_service_data_source_returns_12_and_announces_itself(capsys: pytest.CaptureFixture[str]) -> None:
    assert WebServiceDataSource().fetch_value() == 12.0
    assert capsys.readouterr().out == "Web Service version\n"


def test_data_source_is_abstract() -> None:
    with pytest.raises(TypeError):
        DataSource()  # type: ignore[abstract]


@pytest.mark.parametrize(
    ("data_source", "expected"),
    [
        (DatabaseDataSource(), 529.0),
        (WebServiceDataSource(), 276.0),
    ],
)
def test_constructor_injection_multiplies_by_23(data_source: DataSource, expected: float) -> None:
    calculator = MultiplierCalculator(data_source)

    assert calculator.compute() == expected
    assert calculator.compute() == data_source.fetch_value() * MULTIPLIER


def test_mutator_injection_attaches_data_source() -> None:
    data_source = WebServiceDataSource()
    calculator = MultiplierCalculator()

    calculator.set_data_source(data_source)

    assert calculator.data_source is data_source
    assert calculator.compute() == 276.0


def test_mutator_replaces_constructor_data_source() -> None:
    calculator = MultiplierCalculator(DatabaseDataSource())

    calculator.set_data_source(WebServiceDataSource())

    assert calculator.compute() == 276.0


def test_compute_without_data_source_raises() -> None:
    calculator = MultiplierCalculator()

    with pytest.raises(WiringLabDataSourceNotSetError, match="no data source attached"):
        calculator.compute()
