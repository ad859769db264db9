"""Contains error rate estimation for majority vote rules of single attributes."""
from __future__ import annotations

from dataclasses import dataclass

from oner._majority import Majorities
from oner._majority import MajorityInfo
from oner._schema import Schema
from oner._tally import Tally


@dataclass(frozen=True)
class AttributeErrorRate:
    """Training error of a majority vote rule built on a single attribute."""

    attribute_index: int
    attribute_name: str
    # number of training instances the rule would misclassify
    misclassified: int
    total_error: float
    value_error_rates: dict[str, float]


def value_error_rate(total: int, majority_count: int) -> float:
    """Returns fraction of instances with given value not belonging to its majority
    class. Values never seen in training contribute no error, so 0.0 is returned
    for them.
    """
    if total == 0:
        return 0.0
    return (total - majority_count) / total


def estimate_errors(
    schema: Schema,
    tally: Tally,
    majorities: Majorities,
    instance_count: int,
) -> list[AttributeErrorRate]:
    """Computes per value error rates and total error of every predictor attribute.

    Args:
        schema (Schema): dataset schema
        tally (Tally): class counts
        majorities (Majorities): majority info from `resolve_majorities`
        instance_count (int): number of processed training instances

    Returns:
        list[AttributeErrorRate]: error rates in schema declaration order. Total
            error is 0.0 for every attribute when `instance_count` is 0.
    """
    errors: list[AttributeErrorRate] = []
    for attribute_index, attribute in enumerate(schema.predictors):
        misclassified: int = 0
        value_error_rates: dict[str, float] = {}
        for value in attribute.domain:
            majority: MajorityInfo = majorities[attribute_index][value]
            total: int = tally.total(attribute_index, value)
            misclassified += total - majority.majority_count
            value_error_rates[value] = value_error_rate(
                total, majority.majority_count)
        total_error: float = (
            misclassified / instance_count if instance_count > 0 else 0.0
        )
        errors.append(
            AttributeErrorRate(
                attribute_index=attribute_index,
                attribute_name=attribute.name,
                misclassified=misclassified,
                total_error=total_error,
                value_error_rates=value_error_rates,
            )
        )
    return errors
