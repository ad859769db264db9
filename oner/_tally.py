"""Contains code for counting co-occurrences of attribute values and class labels."""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Iterable
from typing import Mapping

from oner._schema import Instance
from oner._schema import Schema


@dataclass
class ValueTally:
    """Class label counts for a single attribute value. `total` is always equal to
    the sum of `class_counts`.
    """

    class_counts: dict[str, int]
    total: int = 0

    @staticmethod
    def empty(class_labels: Iterable[str]) -> ValueTally:
        return ValueTally(class_counts={label: 0 for label in class_labels})

    def add(self, class_label: str):
        self.class_counts[class_label] += 1
        self.total += 1


@dataclass
class Tally:
    """Per predictor (by position in schema) mapping of value label to its class
    counts. Filled only by `build_tallies` and not to be mutated afterwards;
    `class_counts` returns a read-only view.
    """

    attributes: list[dict[str, ValueTally]] = field(default_factory=list)
    instance_count: int = 0

    def value_tally(self, attribute_index: int, value: str) -> ValueTally:
        return self.attributes[attribute_index][value]

    def class_counts(self, attribute_index: int, value: str) -> Mapping[str, int]:
        return MappingProxyType(self.attributes[attribute_index][value].class_counts)

    def total(self, attribute_index: int, value: str) -> int:
        return self.attributes[attribute_index][value].total


def build_tallies(schema: Schema, instances: Iterable[Instance]) -> Tally:
    """Scans instances once and counts, for every predictor attribute, how many
    times each of its values co-occurs with each class label.

    Values missing from an attribute's domain and class labels missing from the
    class domain are not counted anywhere. Every scanned instance is counted in
    `instance_count` though.

    Args:
        schema (Schema): dataset schema
        instances (Iterable[Instance]): training instances

    Returns:
        Tally: class counts for every (attribute, value, class) triple
    """
    class_labels: tuple[str, ...] = schema.class_labels
    tally = Tally(
        attributes=[
            {value: ValueTally.empty(class_labels) for value in attribute.domain}
            for attribute in schema.predictors
        ]
    )
    known_classes: set[str] = set(class_labels)

    for instance in instances:
        tally.instance_count += 1
        class_label: str = instance[-1]
        if class_label not in known_classes:
            continue
        for attribute_index, value_tallies in enumerate(tally.attributes):
            value_tally: ValueTally = value_tallies.get(instance[attribute_index])
            if value_tally is not None:
                value_tally.add(class_label)
    return tally
