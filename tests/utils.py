import os
import pathlib

import pandas as pd

from oner import AttributeSpec
from oner import Schema
from oner.arff import ArffDataset
from oner.arff import read_arff

dir_path: pathlib.Path = pathlib.Path(os.path.dirname(os.path.realpath(__file__)))
datasets_path: pathlib.Path = dir_path / "datasets"


def dataset_path(dataset_name: str) -> pathlib.Path:
    return datasets_path / f"{dataset_name}.arff"


def read_dataset(dataset_name: str) -> ArffDataset:
    return read_arff(dataset_path(dataset_name))


def read_dataframes(
    dataset_name: str,
) -> tuple[pd.DataFrame, pd.Series]:
    return read_dataset(dataset_name).to_dataframe()


def make_schema(*attributes: tuple[str, list[str]]) -> Schema:
    """Builds schema from (name, domain) pairs, class attribute last."""
    return Schema(
        attributes=tuple(
            AttributeSpec(name=name, domain=tuple(domain)) for name, domain in attributes
        )
    )
