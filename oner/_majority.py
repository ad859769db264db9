from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from typing import TypeAlias

from oner._schema import Schema
from oner._tally import Tally
from oner._tally import ValueTally


@dataclass(frozen=True)
class MajorityInfo:
    value: str
    # None when the value was never seen with a known class
    majority_class: Optional[str]
    majority_count: int
    total: int

    @property
    def has_majority(self) -> bool:
        return self.majority_class is not None


Majorities: TypeAlias = list[dict[str, MajorityInfo]]


def resolve_majority(
    value: str, value_tally: ValueTally, class_labels: tuple[str, ...]
) -> MajorityInfo:
    """Selects the most frequent class for a single attribute value. On ties the
    class declared first wins.
    """
    majority_class: Optional[str] = None
    majority_count: int = 0
    for class_label in class_labels:
        count: int = value_tally.class_counts[class_label]
        if count > majority_count:
            majority_class, majority_count = class_label, count
    return MajorityInfo(
        value=value,
        majority_class=majority_class,
        majority_count=majority_count,
        total=value_tally.total,
    )


def resolve_majorities(schema: Schema, tally: Tally) -> Majorities:
    """Resolves majority class for every value of every predictor attribute.

    Args:
        schema (Schema): dataset schema
        tally (Tally): class counts built by `build_tallies`

    Returns:
        Majorities: list indexed by predictor position, each element maps value
            label to its majority info (in domain order)
    """
    class_labels: tuple[str, ...] = schema.class_labels
    return [
        {
            value: resolve_majority(
                value, tally.value_tally(attribute_index, value), class_labels
            )
            for value in attribute.domain
        }
        for attribute_index, attribute in enumerate(schema.predictors)
    ]
