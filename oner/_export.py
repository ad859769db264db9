"""Contains conversion of induced rules to the rulesets of
`decision-rules <https://github.com/ruleminer/decision-rules>`_ package, so they can
be serialized, updated on data and used for prediction with its tooling.
"""
from decision_rules.classification import ClassificationConclusion
from decision_rules.classification import ClassificationRule
from decision_rules.classification import ClassificationRuleSet
from decision_rules.conditions import CompoundCondition
from decision_rules.conditions import LogicOperators
from decision_rules.conditions import NominalCondition

from oner._rule import Rule
from oner._schema import Schema


def to_classification_ruleset(rule: Rule, schema: Schema) -> ClassificationRuleSet:
    """Builds a ruleset with one rule per value the given rule has a prediction for:
        IF attribute = value THEN class = predicted_class

    Args:
        rule (Rule): induced rule
        schema (Schema): schema the rule was induced on

    Returns:
        ClassificationRuleSet: equivalent ruleset, values without prediction are
            omitted
    """
    column_names: list[str] = [attribute.name for attribute in schema.predictors]
    class_name: str = schema.class_attribute.name
    rules: list[ClassificationRule] = []
    for value, class_label in rule.predictions.items():
        if class_label is None:
            continue
        rules.append(
            ClassificationRule(
                premise=CompoundCondition(
                    subconditions=[
                        NominalCondition(
                            column_index=rule.attribute_index, value=value)
                    ],
                    logic_operator=LogicOperators.CONJUNCTION,
                ),
                conclusion=ClassificationConclusion(
                    value=class_label, column_name=class_name
                ),
                column_names=column_names,
            )
        )
    return ClassificationRuleSet(rules=rules)
