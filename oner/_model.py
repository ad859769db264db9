from typing import Any
from typing import Optional

import numpy as np
import pandas as pd
from decision_rules.classification import ClassificationRuleSet
from sklearn.base import BaseEstimator
from sklearn.exceptions import NotFittedError

from oner._classify import ClassificationCounts
from oner._export import to_classification_ruleset
from oner._induction import InductionTimes
from oner._induction import RuleInducer
from oner._params import DEFAULT_PARAMS_VALUES
from oner._params import resolve_params
from oner._rule import Rule
from oner._schema import instances_from_dataframe
from oner._schema import Schema
from oner._schema import schema_from_dataframe
from oner.report import summarize_training


class OneRClassifier(BaseEstimator):
    """Classifier based on OneR algorithm. It selects a single nominal attribute
    whose majority vote rule makes the fewest errors on training data and produces
    a rule in the following form:
        IF a = v1 THEN label = c1
        IF a = v2 THEN label = c2
        ...
    """

    def __init__(
        self,
        fallback_to_majority: bool = DEFAULT_PARAMS_VALUES["fallback_to_majority"],
        enable_logging: bool = DEFAULT_PARAMS_VALUES["enable_logging"],
    ):
        """
        Args:
            fallback_to_majority (bool, optional): When enabled, `predict` returns the
                training majority class for values the rule has no prediction for.
                Otherwise None is returned for them. It does not affect `evaluate`
                and `score`, which always skip such instances. Defaults to
                DEFAULT_PARAMS_VALUES["fallback_to_majority"].
            enable_logging (bool, optional): Enables induction logs. Defaults to
                DEFAULT_PARAMS_VALUES["enable_logging"].
        """
        # pylint: disable=unused-argument
        params: dict = locals()
        params.pop("self")
        self._params: dict[str, Any] = params

        self.schema: Optional[Schema] = None
        self.columns: Optional[list] = None
        self.rule: Optional[Rule] = None
        self.ruleset: Optional[ClassificationRuleSet] = None
        self.default_class: Optional[str] = None
        self.induction_times: InductionTimes = None
        self.training_summary: pd.DataFrame = None
        self._inducer: RuleInducer = None

    def set_params(self, **params):
        self._params.update(params)
        return self

    def get_params(self, deep=True) -> dict:
        return self._params

    def fit(self, X: pd.DataFrame, y: pd.Series) -> Rule:
        """Induces a rule on given data.

        Args:
            X (pd.DataFrame): dataset with nominal attributes
            y (pd.Series): label column

        Raises:
            ValueError: if data contains missing values

        Returns:
            Rule: induced rule, also available as `rule` attribute
        """
        self.schema = schema_from_dataframe(X, y)
        # labels as given by the caller, schema names are their str form
        self.columns = list(X.columns)
        self._inducer = RuleInducer(resolve_params(self._params))
        self.rule = self._inducer.induce_rule(
            self.schema, instances_from_dataframe(X, y)
        )
        self.default_class = self._majority_class(y)
        self.induction_times = self._inducer.induction_times
        self.training_summary = summarize_training(
            self.schema,
            self._inducer.tally,
            self._inducer.majorities,
            self._inducer.attribute_errors,
        )
        self.ruleset = to_classification_ruleset(self.rule, self.schema)
        self.ruleset.decision_attribute = self.schema.class_attribute.name
        return self.rule

    def predict(self, X: pd.DataFrame) -> np.ndarray:
        """
        Args:
            X (pd.DataFrame): data with the same columns as used for training

        Returns:
            np.ndarray: predicted labels (object dtype); None for values the rule has
                no prediction for unless `fallback_to_majority` is enabled
        """
        self._check_is_fitted()
        fallback: Optional[str] = (
            self.default_class if self._params["fallback_to_majority"] else None
        )
        predictions: list[Optional[str]] = []
        rule_column = self.columns[self.rule.attribute_index]
        for value in X[rule_column].astype(str):
            predicted: Optional[str] = self.rule.predict_value(value)
            predictions.append(fallback if predicted is None else predicted)
        return np.array(predictions, dtype=object)

    def evaluate(self, X: pd.DataFrame, y: pd.Series) -> ClassificationCounts:
        """Counts correctly and incorrectly classified instances of given data.
        Instances with values the rule has no prediction for are skipped.
        """
        self._check_is_fitted()
        X = X[self.columns]
        return self._inducer.evaluate(
            self.schema, instances_from_dataframe(X, y))

    def score(self, X: pd.DataFrame, y: pd.Series) -> float:
        """
        Returns:
            float: accuracy on instances the rule has a prediction for
        """
        return self.evaluate(X, y).accuracy

    def _majority_class(self, y: pd.Series) -> Optional[str]:
        counts: pd.Series = y.astype(str).value_counts()
        majority_class: Optional[str] = None
        majority_count: int = 0
        for class_label in self.schema.class_labels:
            count: int = int(counts.get(class_label, 0))
            if count > majority_count:
                majority_class, majority_count = class_label, count
        return majority_class

    def _check_is_fitted(self):
        if self.rule is None:
            raise NotFittedError(
                f"This {self.__class__.__name__} instance is not fitted yet. "
                "Call 'fit' with appropriate arguments before using this estimator."
            )
