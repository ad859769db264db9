"""Command line entry point: induces a rule on a training ARFF file and classifies
instances of a test ARFF file with it.

    python -m oner train.arff test.arff
"""
import argparse
import logging
import sys
from typing import Optional
from typing import Sequence

import numpy as np
from sklearn import metrics

from oner._classify import ClassificationCounts
from oner._model import OneRClassifier
from oner.arff import ArffDataset
from oner.arff import ArffFormatError
from oner.arff import read_arff
from oner.report import format_counts
from oner.report import format_rule


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="oner",
        description="Induce a OneR rule from nominal ARFF data and evaluate it.",
    )
    ap.add_argument("train", type=str, help="ARFF file to induce the rule from")
    ap.add_argument("test", type=str, help="ARFF file to classify")
    ap.add_argument(
        "--fallback-to-majority",
        action="store_true",
        help="Also report accuracy when values unknown to the rule are predicted "
        "as the training majority class.",
    )
    ap.add_argument("--verbose", action="store_true",
                    help="Log induction progress.")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="[%(name)s] %(levelname)s: %(message)s"
        )

    try:
        train: ArffDataset = read_arff(args.train)
        test: ArffDataset = read_arff(args.test)
    except (OSError, ArffFormatError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    X_train, y_train = train.to_dataframe()
    X_test, y_test = test.to_dataframe()
    model = OneRClassifier(
        fallback_to_majority=args.fallback_to_majority,
        enable_logging=args.verbose,
    )
    model.fit(X_train, y_train)
    try:
        counts: ClassificationCounts = model.evaluate(X_test, y_test)
    except KeyError as error:
        print(
            f"error: test data does not match training attributes: {error}",
            file=sys.stderr,
        )
        return 1

    print("The rule generated by OneR is as follows:")
    print()
    print(format_rule(model.rule))
    print()
    print(format_counts(counts))
    if args.fallback_to_majority and X_test.shape[0] > 0:
        predictions: np.ndarray = model.predict(X_test)
        accuracy: float = metrics.accuracy_score(y_test.astype(str), predictions)
        print(f"Accuracy with majority fallback: {accuracy:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
