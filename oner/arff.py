"""Contains a reader for ARFF files with nominal attributes only, e.g.:

    @relation weather
    @attribute outlook {sunny, overcast, rainy}
    @attribute play {yes, no}
    @data
    sunny,no
    % comment lines start with a percent sign
    overcast,yes

The last declared attribute is treated as the class attribute.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from oner._schema import AttributeSpec
from oner._schema import Schema

ATTRIBUTE_LINE_RE = re.compile(
    r"@attribute\s+(?:'([^']*)'|\"([^\"]*)\"|(\S+))\s*(.*)$", re.IGNORECASE
)
MISSING_VALUE: str = "?"


class ArffFormatError(ValueError):
    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number: Optional[int] = line_number


@dataclass
class ArffDataset:
    relation: Optional[str]
    schema: Schema
    instances: list[tuple[str, ...]]

    def to_dataframe(self) -> tuple[pd.DataFrame, pd.Series]:
        """
        Returns:
            tuple[pd.DataFrame, pd.Series]: predictors and class column, all with
                categorical dtype following declared domains order
        """
        columns: list[str] = [attribute.name for attribute in self.schema.attributes]
        df = pd.DataFrame(self.instances, columns=columns, dtype=object)
        for attribute in self.schema.attributes:
            df[attribute.name] = df[attribute.name].astype(
                pd.CategoricalDtype(categories=list(attribute.domain))
            )
        class_name: str = self.schema.class_attribute.name
        return df.drop(class_name, axis=1), df[class_name]


def _strip_quotes(token: str) -> str:
    token = token.strip()
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ("'", '"'):
        return token[1:-1]
    return token


def _parse_values(text: str) -> list[str]:
    return [_strip_quotes(value) for value in text.split(",")]


def _parse_attribute(line: str, line_number: int) -> AttributeSpec:
    match = ATTRIBUTE_LINE_RE.match(line)
    if match is None:
        raise ArffFormatError(
            f"malformed attribute declaration: {line}", line_number)
    name: str = next(group for group in match.groups()[:3] if group is not None)
    type_declaration: str = match.group(4).strip()
    if not (type_declaration.startswith("{") and type_declaration.endswith("}")):
        raise ArffFormatError(
            f'attribute "{name}" is not nominal, only nominal attributes are '
            f"supported: {type_declaration}",
            line_number,
        )
    domain: list[str] = [
        value for value in _parse_values(type_declaration[1:-1]) if value != ""
    ]
    try:
        return AttributeSpec(name=name, domain=tuple(domain))
    except ValueError as error:
        raise ArffFormatError(str(error), line_number) from error


def _parse_instance(
    line: str, line_number: int, schema: Schema
) -> tuple[str, ...]:
    values: list[str] = _parse_values(line)
    if len(values) != len(schema.attributes):
        raise ArffFormatError(
            f"expected {len(schema.attributes)} values, got {len(values)}",
            line_number,
        )
    for value, attribute in zip(values, schema.attributes):
        if value == MISSING_VALUE:
            raise ArffFormatError(
                f'missing value of attribute "{attribute.name}" is not supported',
                line_number,
            )
        if value not in attribute.domain:
            raise ArffFormatError(
                f'value "{value}" is not in domain of attribute "{attribute.name}"',
                line_number,
            )
    return tuple(values)


def parse_arff(text: str) -> ArffDataset:
    """Parses content of an ARFF file.

    Args:
        text (str): file content

    Raises:
        ArffFormatError: on malformed content, numeric attributes, missing values or
            values outside of declared domains

    Returns:
        ArffDataset: parsed dataset
    """
    relation: Optional[str] = None
    attributes: list[AttributeSpec] = []
    schema: Optional[Schema] = None
    instances: list[tuple[str, ...]] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line: str = raw_line.strip()
        if line == "" or line.startswith("%"):
            continue
        if schema is not None:
            instances.append(_parse_instance(line, line_number, schema))
            continue
        keyword: str = line.split(maxsplit=1)[0].lower()
        if keyword == "@relation":
            relation = _strip_quotes(line[len(keyword):])
        elif keyword == "@attribute":
            attributes.append(_parse_attribute(line, line_number))
        elif keyword == "@data":
            try:
                schema = Schema(attributes=tuple(attributes))
            except ValueError as error:
                raise ArffFormatError(str(error), line_number) from error
        else:
            raise ArffFormatError(f"unexpected line: {line}", line_number)

    if schema is None:
        raise ArffFormatError("missing @data section")
    return ArffDataset(relation=relation, schema=schema, instances=instances)


def read_arff(path: str | os.PathLike) -> ArffDataset:
    """Reads an UTF-8 encoded ARFF file.

    Raises:
        ArffFormatError: on malformed content or when the file is not valid UTF-8
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            text: str = f.read()
        except UnicodeDecodeError as error:
            raise ArffFormatError(f"{path} is not UTF-8 encoded: {error}") from error
    return parse_arff(text)
