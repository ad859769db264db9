from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from typing import Optional

from oner._errors import AttributeErrorRate
from oner._majority import Majorities
from oner._schema import Schema


@dataclass(frozen=True)
class Rule:
    """Single attribute rule. Maps every value of the selected attribute to the
    predicted class, `None` standing for values never observed in training.
    """

    attribute_name: str
    attribute_index: int
    predictions: Mapping[str, Optional[str]]
    total_error: float

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(
            self, "predictions", MappingProxyType(dict(self.predictions))
        )

    def __reduce__(self):
        return (
            self.__class__,
            (
                self.attribute_name,
                self.attribute_index,
                dict(self.predictions),
                self.total_error,
            ),
        )

    def predict_value(self, value: str) -> Optional[str]:
        """
        Returns:
            Optional[str]: predicted class or None if the value is unknown to the rule
                or was never observed in training
        """
        return self.predictions.get(value)

    def __str__(self) -> str:
        conclusions: str = ", ".join(
            f"{value} -> {'?' if label is None else label}"
            for value, label in self.predictions.items()
        )
        return f"{self.attribute_name}: {conclusions}"


def select_best_attribute(
    attribute_errors: list[AttributeErrorRate],
) -> AttributeErrorRate:
    """Returns attribute with the lowest total error, first declared wins on ties."""
    if len(attribute_errors) == 0:
        raise ValueError("Cannot select a rule without candidate attributes")
    best: AttributeErrorRate = attribute_errors[0]
    for candidate in attribute_errors[1:]:
        if candidate.total_error < best.total_error:
            best = candidate
    return best


def select_rule(
    schema: Schema,
    attribute_errors: list[AttributeErrorRate],
    majorities: Majorities,
) -> Rule:
    """Picks the predictor with minimal total error and builds its rule.

    Args:
        schema (Schema): dataset schema
        attribute_errors (list[AttributeErrorRate]): errors in declaration order
        majorities (Majorities): majority info from `resolve_majorities`

    Returns:
        Rule: rule covering every value in the selected attribute's domain
    """
    best: AttributeErrorRate = select_best_attribute(attribute_errors)
    attribute_index: int = best.attribute_index
    return Rule(
        attribute_name=best.attribute_name,
        attribute_index=attribute_index,
        predictions={
            value: majorities[attribute_index][value].majority_class
            for value in schema.attributes[attribute_index].domain
        },
        total_error=best.total_error,
    )
