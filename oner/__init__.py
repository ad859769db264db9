"""
Package implementing the OneR rule induction algorithm. It selects a single nominal
attribute whose majority vote rule makes the fewest errors on training data and uses
that rule to classify new instances.

Each induction stage is available as a plain function operating on in-memory
schema and instances, and the whole pipeline is wrapped in a scikit-learn style
:class:`OneRClassifier` working on pandas data frames.
"""
from oner._classify import classify
from oner._classify import ClassificationCounts
from oner._errors import AttributeErrorRate
from oner._errors import estimate_errors
from oner._errors import value_error_rate
from oner._export import to_classification_ruleset
from oner._induction import InductionTimes
from oner._induction import RuleInducer
from oner._majority import Majorities
from oner._majority import MajorityInfo
from oner._majority import resolve_majorities
from oner._model import OneRClassifier
from oner._rule import Rule
from oner._rule import select_rule
from oner._schema import AttributeSpec
from oner._schema import Instance
from oner._schema import instances_from_dataframe
from oner._schema import Schema
from oner._schema import schema_from_dataframe
from oner._tally import build_tallies
from oner._tally import Tally
from oner._tally import ValueTally

__all__ = [
    "AttributeErrorRate",
    "AttributeSpec",
    "ClassificationCounts",
    "InductionTimes",
    "Instance",
    "Majorities",
    "MajorityInfo",
    "OneRClassifier",
    "Rule",
    "RuleInducer",
    "Schema",
    "Tally",
    "ValueTally",
    "build_tallies",
    "classify",
    "estimate_errors",
    "instances_from_dataframe",
    "resolve_majorities",
    "schema_from_dataframe",
    "select_rule",
    "to_classification_ruleset",
    "value_error_rate",
]
