"""Contains the schema and instance model shared by every stage of the induction.
A schema is an ordered list of nominal attributes, the last one being the class
attribute. Instances are plain sequences of value labels aligned with it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from typing import TypeAlias

import pandas as pd

Instance: TypeAlias = Sequence[str]


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    domain: tuple[str, ...]

    def __post_init__(self):
        if len(set(self.domain)) != len(self.domain):
            raise ValueError(
                f'Attribute "{self.name}" has duplicated values in its domain: '
                f"{list(self.domain)}"
            )


@dataclass(frozen=True)
class Schema:
    """Ordered nominal attributes. The last attribute is the class attribute."""

    attributes: tuple[AttributeSpec, ...]

    def __post_init__(self):
        if len(self.attributes) < 2:
            raise ValueError(
                "Schema requires at least one predictor attribute and the class "
                f"attribute, got {len(self.attributes)} attribute(s)"
            )
        names: list[str] = [attribute.name for attribute in self.attributes]
        if len(set(names)) != len(names):
            raise ValueError(f"Attribute names must be unique, got: {names}")

    @property
    def predictors(self) -> tuple[AttributeSpec, ...]:
        return self.attributes[:-1]

    @property
    def class_attribute(self) -> AttributeSpec:
        return self.attributes[-1]

    @property
    def class_labels(self) -> tuple[str, ...]:
        return self.class_attribute.domain


def _column_domain(column: pd.Series) -> tuple[str, ...]:
    if isinstance(column.dtype, pd.CategoricalDtype):
        return tuple(str(value) for value in column.cat.categories)
    # order of first appearance keeps tie breaking reproducible
    return tuple(dict.fromkeys(str(value) for value in column))


def _check_no_missing_values(X: pd.DataFrame, y: pd.Series):
    missing_columns: list[str] = [
        str(name) for name in X.columns if X[name].isna().any()
    ]
    if y.isna().any():
        missing_columns.append(str(y.name))
    if missing_columns:
        raise ValueError(
            f"Missing values are not supported, found some in: {missing_columns}"
        )


def schema_from_dataframe(X: pd.DataFrame, y: pd.Series) -> Schema:
    """Derives schema from given data. Categorical columns keep the order of their
    categories, other columns use the order in which values first appear.

    Args:
        X (pd.DataFrame): predictor columns
        y (pd.Series): class column

    Raises:
        ValueError: if data contains missing values or lengths differ

    Returns:
        Schema: schema with class attribute named after `y`
    """
    if X.shape[0] != y.shape[0]:
        raise ValueError(
            f"X and y lengths differ: {X.shape[0]} != {y.shape[0]}")
    _check_no_missing_values(X, y)
    attributes: list[AttributeSpec] = [
        AttributeSpec(name=str(name), domain=_column_domain(X[name]))
        for name in X.columns
    ]
    class_name: str = "class" if y.name is None else str(y.name)
    attributes.append(AttributeSpec(name=class_name, domain=_column_domain(y)))
    return Schema(attributes=tuple(attributes))


def instances_from_dataframe(
    X: pd.DataFrame, y: pd.Series = None
) -> list[tuple[str, ...]]:
    """Converts rows of given data to instances. When `y` is omitted the class
    position is left empty, which is enough for prediction.
    """
    X_str: pd.DataFrame = X.astype(str)
    if y is None:
        labels: list[str] = [""] * X.shape[0]
    else:
        labels = [str(label) for label in y]
    return [
        (*row, label)
        for row, label in zip(X_str.itertuples(index=False, name=None), labels)
    ]
