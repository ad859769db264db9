"""Contains text and tabular presentation of induced rules, training statistics and
classification counts.
"""
import pandas as pd

from oner._classify import ClassificationCounts
from oner._errors import AttributeErrorRate
from oner._majority import Majorities
from oner._majority import MajorityInfo
from oner._rule import Rule
from oner._schema import Schema
from oner._tally import Tally

UNDEFINED_PREDICTION: str = "?"


def format_rule(rule: Rule) -> str:
    lines: list[str] = [f"{rule.attribute_name}:"]
    for value, class_label in rule.predictions.items():
        if class_label is None:
            class_label = UNDEFINED_PREDICTION
        lines.append(f"    {value} ==> {class_label}")
    return "\n".join(lines)


def format_counts(counts: ClassificationCounts) -> str:
    lines: list[str] = [
        f"Correctly classified instances: {counts.correct}",
        f"Incorrectly classified instances: {counts.incorrect}",
        f"Total number of instances: {counts.total}",
    ]
    if counts.skipped > 0:
        lines.append(f"Skipped instances (unseen values): {counts.skipped}")
    return "\n".join(lines)


def summarize_training(
    schema: Schema,
    tally: Tally,
    majorities: Majorities,
    attribute_errors: list[AttributeErrorRate],
) -> pd.DataFrame:
    """Collects training statistics into a data frame with one row per attribute
    value. Class counts are stored in columns named after class labels.

    Returns:
        pd.DataFrame: columns `attribute`, `value`, class labels..., `total`,
            `majority_class`, `majority_count`, `error_rate`,
            `attribute_total_error`
    """
    rows: list[dict] = []
    for attribute_index, attribute in enumerate(schema.predictors):
        error: AttributeErrorRate = attribute_errors[attribute_index]
        for value in attribute.domain:
            majority: MajorityInfo = majorities[attribute_index][value]
            rows.append(
                {
                    "attribute": attribute.name,
                    "value": value,
                    **tally.class_counts(attribute_index, value),
                    "total": tally.total(attribute_index, value),
                    "majority_class": majority.majority_class,
                    "majority_count": majority.majority_count,
                    "error_rate": error.value_error_rates[value],
                    "attribute_total_error": error.total_error,
                }
            )
    columns: list[str] = [
        "attribute",
        "value",
        *schema.class_labels,
        "total",
        "majority_class",
        "majority_count",
        "error_rate",
        "attribute_total_error",
    ]
    return pd.DataFrame(rows, columns=columns)
