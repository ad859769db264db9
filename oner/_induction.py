from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from logging import getLogger
from logging import Logger
from typing import Any
from typing import Callable
from typing import Iterable

from oner._classify import classify
from oner._classify import ClassificationCounts
from oner._errors import AttributeErrorRate
from oner._errors import estimate_errors
from oner._majority import Majorities
from oner._majority import resolve_majorities
from oner._params import AlgorithmParams
from oner._rule import Rule
from oner._rule import select_rule
from oner._schema import Instance
from oner._schema import Schema
from oner._tally import build_tallies
from oner._tally import Tally
from oner._timing import PerformanceTimer


@dataclass
class InductionTimes:
    tallying_time: timedelta = timedelta()
    resolving_time: timedelta = timedelta()
    estimating_time: timedelta = timedelta()
    selection_time: timedelta = timedelta()
    total_training_time: timedelta = timedelta()

    def __repr__(self) -> str:
        return (
            f"tallying_time={self.tallying_time.total_seconds()}, "
            f"resolving_time={self.resolving_time.total_seconds()}, "
            f"estimating_time={self.estimating_time.total_seconds()}, "
            f"selection_time={self.selection_time.total_seconds()}, "
            f"total_training_time={self.total_training_time.total_seconds()}"
        )


class RuleInducer:
    """Runs OneR induction stages one after another and keeps their results so
    they can be inspected or reported after training.
    """

    def __init__(self, params: AlgorithmParams):
        self.params: AlgorithmParams = params
        self.induction_times: InductionTimes = InductionTimes()
        self.tally: Tally = None
        self.majorities: Majorities = None
        self.attribute_errors: list[AttributeErrorRate] = None
        self.rule: Rule = None

        self.logger: Logger = getLogger(self.__class__.__name__)
        self.logger.disabled = not params["enable_logging"]
        self._setup_timers()

    def induce_rule(self, schema: Schema, instances: Iterable[Instance]) -> Rule:
        """Induces a single attribute rule from given training instances.

        Args:
            schema (Schema): dataset schema
            instances (Iterable[Instance]): training instances

        Returns:
            Rule: induced rule
        """
        self.tally = self._tally(schema, instances)
        self.logger.info(
            "Counted %d training instances over %d predictor attributes",
            self.tally.instance_count,
            len(schema.predictors),
        )
        self.majorities = self._resolve(schema, self.tally)
        self.attribute_errors = self._estimate(
            schema, self.tally, self.majorities, self.tally.instance_count
        )
        for error in self.attribute_errors:
            self.logger.debug(
                'Attribute "%s" misclassifies %d instances, total error: %f',
                error.attribute_name,
                error.misclassified,
                error.total_error,
            )
        self.rule = self._select(schema, self.attribute_errors, self.majorities)
        undefined: list[str] = [
            value for value, label in self.rule.predictions.items() if label is None
        ]
        if undefined:
            self.logger.warning(
                'Values %s of attribute "%s" were never observed in training, '
                "rule has no prediction for them",
                undefined,
                self.rule.attribute_name,
            )
        self.logger.info(
            'Selected attribute "%s" with total error: %f',
            self.rule.attribute_name,
            self.rule.total_error,
        )
        return self.rule

    def evaluate(
        self, schema: Schema, test_instances: Iterable[Instance]
    ) -> ClassificationCounts:
        if self.rule is None:
            raise ValueError("Rule must be induced before evaluation")
        counts: ClassificationCounts = classify(
            self.rule, schema, test_instances)
        if counts.skipped > 0:
            self.logger.info(
                "Skipped %d test instances with values unknown to the rule",
                counts.skipped,
            )
        return counts

    def _tally(self, schema: Schema, instances: Iterable[Instance]) -> Tally:
        return build_tallies(schema, instances)

    def _resolve(self, schema: Schema, tally: Tally) -> Majorities:
        return resolve_majorities(schema, tally)

    def _estimate(
        self,
        schema: Schema,
        tally: Tally,
        majorities: Majorities,
        instance_count: int,
    ) -> list[AttributeErrorRate]:
        return estimate_errors(schema, tally, majorities, instance_count)

    def _select(
        self,
        schema: Schema,
        attribute_errors: list[AttributeErrorRate],
        majorities: Majorities,
    ) -> Rule:
        return select_rule(schema, attribute_errors, majorities)

    def _setup_timers(self):
        self._setup_timer_for_method(
            "induce_rule", save_to="total_training_time")
        self._setup_timer_for_method("_tally", save_to="tallying_time")
        self._setup_timer_for_method("_resolve", save_to="resolving_time")
        self._setup_timer_for_method("_estimate", save_to="estimating_time")
        self._setup_timer_for_method("_select", save_to="selection_time")

    def _setup_timer_for_method(self, method_name: str, save_to: str):
        method: Callable = getattr(self, method_name)

        def wrapped_method(*args, **kwargs):
            with PerformanceTimer() as timer:
                result: Any = method(*args, **kwargs)
            new_timedelta: timedelta = (
                getattr(self.induction_times, save_to) + timer.timedelta
            )
            setattr(self.induction_times, save_to, new_timedelta)
            return result

        setattr(self, method_name, wrapped_method)
