import pickle

import pytest
import utils

from oner import AttributeErrorRate
from oner import build_tallies
from oner import estimate_errors
from oner import Majorities
from oner import resolve_majorities
from oner import Rule
from oner import Schema
from oner import select_rule
from oner import Tally
from oner import value_error_rate
from oner.arff import ArffDataset


def induce(schema: Schema, instances: list) -> tuple[Tally, Majorities, list, Rule]:
    tally: Tally = build_tallies(schema, instances)
    majorities: Majorities = resolve_majorities(schema, tally)
    errors: list[AttributeErrorRate] = estimate_errors(
        schema, tally, majorities, tally.instance_count
    )
    return tally, majorities, errors, select_rule(schema, errors, majorities)


@pytest.fixture
def play_schema() -> Schema:
    return utils.make_schema(
        ("weather", ["sunny", "rainy"]),
        ("play", ["yes", "no"]),
    )


@pytest.fixture
def play_instances() -> list[tuple[str, ...]]:
    return [
        ("sunny", "yes"),
        ("sunny", "yes"),
        ("rainy", "no"),
        ("rainy", "no"),
        ("sunny", "no"),
    ]


@pytest.fixture
def weather_dataset() -> ArffDataset:
    return utils.read_dataset("weather")


def test_single_predictor_pipeline(play_schema: Schema, play_instances: list):
    tally, majorities, errors, rule = induce(play_schema, play_instances)

    assert tally.instance_count == 5
    assert tally.class_counts(0, "sunny") == {"yes": 2, "no": 1}
    assert tally.class_counts(0, "rainy") == {"yes": 0, "no": 2}
    assert majorities[0]["sunny"].majority_class == "yes"
    assert majorities[0]["sunny"].majority_count == 2
    assert majorities[0]["rainy"].majority_class == "no"
    assert majorities[0]["rainy"].majority_count == 2
    assert errors[0].misclassified == 1
    assert errors[0].total_error == pytest.approx(0.2)
    assert errors[0].value_error_rates == {
        "sunny": pytest.approx(1 / 3),
        "rainy": 0.0,
    }
    assert rule.attribute_name == "weather"
    assert rule.attribute_index == 0
    assert rule.predictions == {"sunny": "yes", "rainy": "no"}


def test_tally_totals_match_class_counts(weather_dataset: ArffDataset):
    schema: Schema = weather_dataset.schema
    tally: Tally = build_tallies(schema, weather_dataset.instances)

    assert tally.instance_count == 14
    for attribute_index, attribute in enumerate(schema.predictors):
        assert list(tally.attributes[attribute_index].keys()) == list(
            attribute.domain)
        for value in attribute.domain:
            counts: dict[str, int] = tally.class_counts(attribute_index, value)
            assert list(counts.keys()) == list(schema.class_labels)
            assert tally.total(attribute_index, value) == sum(counts.values())
        assert (
            sum(tally.total(attribute_index, value)
                for value in attribute.domain)
            == 14
        )


def test_tally_skips_values_outside_domains(play_schema: Schema):
    tally: Tally = build_tallies(
        play_schema,
        [("sunny", "yes"), ("cloudy", "yes"), ("rainy", "maybe")],
    )

    assert tally.instance_count == 3
    assert tally.class_counts(0, "sunny") == {"yes": 1, "no": 0}
    assert tally.class_counts(0, "rainy") == {"yes": 0, "no": 0}
    assert tally.total(0, "rainy") == 0
    assert "cloudy" not in tally.attributes[0]


def test_majority_tie_goes_to_first_declared_class():
    schema: Schema = utils.make_schema(
        ("a", ["x"]), ("class", ["yes", "no"]))
    reversed_schema: Schema = utils.make_schema(
        ("a", ["x"]), ("class", ["no", "yes"]))
    instances = [("x", "no"), ("x", "yes")]

    _, majorities, _, _ = induce(schema, instances)
    _, reversed_majorities, _, _ = induce(reversed_schema, instances)

    assert majorities[0]["x"].majority_class == "yes"
    assert majorities[0]["x"].majority_count == 1
    assert reversed_majorities[0]["x"].majority_class == "no"


def test_majority_count_is_maximum_of_class_counts(weather_dataset: ArffDataset):
    schema: Schema = weather_dataset.schema
    tally, majorities, _, _ = induce(schema, weather_dataset.instances)

    for attribute_index, attribute in enumerate(schema.predictors):
        for value in attribute.domain:
            counts: dict[str, int] = tally.class_counts(attribute_index, value)
            majority = majorities[attribute_index][value]
            assert majority.majority_count == max(counts.values())
            first_maximal: str = next(
                label
                for label in schema.class_labels
                if counts[label] == majority.majority_count
            )
            assert majority.majority_class == first_maximal


def test_attribute_tie_goes_to_first_declared_attribute():
    instances = [
        ("x", "p", "yes"),
        ("x", "p", "yes"),
        ("y", "q", "no"),
        ("y", "q", "no"),
        ("x", "p", "no"),
    ]
    schema: Schema = utils.make_schema(
        ("a", ["x", "y"]), ("b", ["p", "q"]), ("class", ["yes", "no"])
    )
    swapped_schema: Schema = utils.make_schema(
        ("b", ["p", "q"]), ("a", ["x", "y"]), ("class", ["yes", "no"])
    )
    swapped_instances = [(b, a, label) for a, b, label in instances]

    _, _, errors, rule = induce(schema, instances)
    _, _, _, swapped_rule = induce(swapped_schema, swapped_instances)

    assert [error.total_error for error in errors] == [
        pytest.approx(0.2),
        pytest.approx(0.2),
    ]
    assert rule.attribute_name == "a"
    assert swapped_rule.attribute_name == "b"


def test_rule_selection_is_deterministic(weather_dataset: ArffDataset):
    schema: Schema = weather_dataset.schema
    _, majorities, errors, rule = induce(schema, weather_dataset.instances)

    for _ in range(3):
        assert select_rule(schema, errors, majorities) == rule


def test_weather_rule(weather_dataset: ArffDataset):
    _, _, errors, rule = induce(
        weather_dataset.schema, weather_dataset.instances)

    assert [error.misclassified for error in errors] == [4, 5, 4, 5]
    assert [error.total_error for error in errors] == [
        pytest.approx(4 / 14),
        pytest.approx(5 / 14),
        pytest.approx(4 / 14),
        pytest.approx(5 / 14),
    ]
    # outlook and humidity tie, outlook is declared first
    assert rule.attribute_name == "outlook"
    assert rule.predictions == {
        "sunny": "no", "overcast": "yes", "rainy": "yes"}
    assert rule.total_error == pytest.approx(4 / 14)


def test_error_rates_are_fractions(weather_dataset: ArffDataset):
    _, _, errors, _ = induce(weather_dataset.schema, weather_dataset.instances)

    for error in errors:
        for rate in error.value_error_rates.values():
            assert 0.0 <= rate <= 1.0


def test_misclassified_sum_does_not_depend_on_attribute_order(
    weather_dataset: ArffDataset,
):
    schema: Schema = weather_dataset.schema
    order: list[int] = [3, 1, 0, 2]
    reordered_schema: Schema = Schema(
        attributes=tuple(schema.attributes[i] for i in order)
        + (schema.class_attribute,)
    )
    reordered_instances = [
        tuple(instance[i] for i in order) + (instance[-1],)
        for instance in weather_dataset.instances
    ]

    _, _, errors, _ = induce(schema, weather_dataset.instances)
    _, _, reordered_errors, _ = induce(reordered_schema, reordered_instances)

    assert sum(error.misclassified for error in errors) == sum(
        error.misclassified for error in reordered_errors
    )


def test_unobserved_value_has_no_majority():
    schema: Schema = utils.make_schema(
        ("weather", ["sunny", "rainy", "foggy"]),
        ("play", ["yes", "no"]),
    )
    instances = [("sunny", "yes"), ("rainy", "no"), ("sunny", "no")]

    tally, majorities, errors, rule = induce(schema, instances)

    foggy = majorities[0]["foggy"]
    assert tally.total(0, "foggy") == 0
    assert not foggy.has_majority
    assert foggy.majority_class is None
    assert foggy.majority_count == 0
    assert errors[0].value_error_rates["foggy"] == 0.0
    assert rule.predictions == {
        "sunny": "yes", "rainy": "no", "foggy": None}
    assert rule.predict_value("foggy") is None


def test_empty_training_set():
    schema: Schema = utils.make_schema(
        ("a", ["x", "y"]), ("b", ["p", "q"]), ("class", ["yes", "no"])
    )

    tally, majorities, errors, rule = induce(schema, [])

    assert tally.instance_count == 0
    assert all(error.total_error == 0.0 for error in errors)
    assert all(
        not majority.has_majority
        for attribute_majorities in majorities
        for majority in attribute_majorities.values()
    )
    assert rule.attribute_name == "a"
    assert rule.predictions == {"x": None, "y": None}


def test_instance_count_includes_unknown_class_labels(play_schema: Schema):
    instances = [("sunny", "yes"), ("rainy", "no"), ("rainy", "maybe")]

    tally, _, errors, _ = induce(play_schema, instances)

    assert tally.instance_count == 3
    assert errors[0].misclassified == 0
    assert errors[0].total_error == 0.0


def test_value_error_rate():
    assert value_error_rate(0, 0) == 0.0
    assert value_error_rate(4, 4) == 0.0
    assert value_error_rate(4, 3) == pytest.approx(0.25)


def test_pipeline_is_idempotent(weather_dataset: ArffDataset):
    first = induce(weather_dataset.schema, weather_dataset.instances)
    second = induce(weather_dataset.schema, weather_dataset.instances)

    assert first[1] == second[1]
    assert first[2] == second[2]
    assert first[3] == second[3]


def test_schema_validation():
    with pytest.raises(ValueError):
        utils.make_schema(("class", ["yes", "no"]))
    with pytest.raises(ValueError):
        utils.make_schema(("a", ["x", "x"]), ("class", ["yes", "no"]))
    with pytest.raises(ValueError):
        utils.make_schema(("a", ["x"]), ("a", ["y"]), ("class", ["yes"]))


def test_built_structures_are_read_only(play_schema: Schema, play_instances: list):
    tally, _, _, rule = induce(play_schema, play_instances)

    with pytest.raises(TypeError):
        tally.class_counts(0, "sunny")["yes"] = 10
    with pytest.raises(TypeError):
        rule.predictions["rainy"] = "yes"
    assert tally.class_counts(0, "sunny") == {"yes": 2, "no": 1}
    assert rule.predictions == {"sunny": "yes", "rainy": "no"}


def test_rule_keeps_own_copy_of_predictions():
    predictions = {"sunny": "yes", "rainy": "no"}
    rule = Rule(
        attribute_name="weather",
        attribute_index=0,
        predictions=predictions,
        total_error=0.2,
    )
    predictions["rainy"] = "yes"

    assert rule.predict_value("rainy") == "no"
    assert pickle.loads(pickle.dumps(rule)) == rule
