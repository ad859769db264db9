import pandas as pd
import pytest
import utils

from oner.arff import ArffDataset
from oner.arff import ArffFormatError
from oner.arff import parse_arff
from oner.arff import read_arff

HEADER: str = """
@relation toy
@attribute 'colour name' {red, 'dark blue'}
@attribute class {yes, no}
@data
"""


def test_read_weather():
    dataset: ArffDataset = utils.read_dataset("weather")

    assert dataset.relation == "weather.symbolic"
    assert [attribute.name for attribute in dataset.schema.attributes] == [
        "outlook",
        "temperature",
        "humidity",
        "windy",
        "play",
    ]
    assert dataset.schema.predictors[0].domain == (
        "sunny", "overcast", "rainy")
    assert dataset.schema.class_labels == ("yes", "no")
    assert len(dataset.instances) == 14
    assert dataset.instances[0] == ("sunny", "hot", "high", "FALSE", "no")
    assert dataset.instances[-1] == ("rainy", "mild", "high", "TRUE", "no")


def test_keywords_are_case_insensitive():
    dataset: ArffDataset = utils.read_dataset("weather-test")

    assert dataset.relation == "weather.test"
    assert dataset.schema.predictors[0].domain == (
        "sunny",
        "overcast",
        "rainy",
        "foggy",
    )
    assert len(dataset.instances) == 4


def test_quoted_names_and_values():
    dataset: ArffDataset = parse_arff(HEADER + "'dark blue', yes\nred,no\n")

    assert dataset.schema.attributes[0].name == "colour name"
    assert dataset.schema.attributes[0].domain == ("red", "dark blue")
    assert dataset.instances == [("dark blue", "yes"), ("red", "no")]


def test_to_dataframe():
    X, y = utils.read_dataframes("weather")

    assert list(X.columns) == ["outlook", "temperature", "humidity", "windy"]
    assert y.name == "play"
    assert X.shape == (14, 4)
    assert isinstance(X["outlook"].dtype, pd.CategoricalDtype)
    assert list(X["outlook"].cat.categories) == ["sunny", "overcast", "rainy"]
    assert list(y.cat.categories) == ["yes", "no"]


@pytest.mark.parametrize(
    "content",
    [
        HEADER + "red\n",
        HEADER + "red,?\n",
        HEADER + "green,yes\n",
        "@relation toy\n@attribute x numeric\n@attribute class {a, b}\n@data\n",
        "@relation toy\n@attribute x {a, a}\n@attribute class {a, b}\n@data\n",
        "@relation toy\n@attribute class {a, b}\n@data\n",
        "@relation toy\n@attribute x {a}\n@attribute class {a, b}\n",
        "@relation toy\n@attribute x {a}\nfoo\n@attribute class {a, b}\n@data\n",
    ],
)
def test_malformed_content(content: str):
    with pytest.raises(ArffFormatError):
        parse_arff(content)


def test_error_reports_line_number():
    with pytest.raises(ArffFormatError) as error:
        parse_arff(HEADER + "red,yes\nred,maybe\n")

    assert error.value.line_number == 7
    assert "line 7" in str(error.value)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.arff"
    path.write_bytes("@relation caf\u00e9\n".encode("latin-1"))

    with pytest.raises(ArffFormatError):
        read_arff(path)
