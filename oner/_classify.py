from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable
from typing import Optional

from oner._rule import Rule
from oner._schema import Instance
from oner._schema import Schema


@dataclass(frozen=True)
class ClassificationCounts:
    correct: int = 0
    incorrect: int = 0
    # instances with values the rule has no prediction for
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return float("nan")
        return self.correct / self.total


def classify(
    rule: Rule, schema: Schema, test_instances: Iterable[Instance]
) -> ClassificationCounts:
    """Applies rule to test instances and counts correct and incorrect predictions.

    Only the instance field at the rule's attribute position is looked up.
    Instances for which the rule has no prediction are skipped and counted
    separately.

    Args:
        rule (Rule): rule to evaluate
        schema (Schema): schema of the test instances
        test_instances (Iterable[Instance]): test instances with class label last

    Returns:
        ClassificationCounts: classification counts
    """
    class_position: int = len(schema.attributes) - 1
    correct, incorrect, skipped = 0, 0, 0
    for instance in test_instances:
        predicted: Optional[str] = rule.predict_value(
            instance[rule.attribute_index])
        if predicted is None:
            skipped += 1
        elif predicted == instance[class_position]:
            correct += 1
        else:
            incorrect += 1
    return ClassificationCounts(correct=correct, incorrect=incorrect, skipped=skipped)
