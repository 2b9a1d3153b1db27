"""
Fit a linear model to a CSV dataset by gradient descent.

The dataset must have a header row; the target is the last column unless
`--target-column` is given.

Usage:
```bash
gd-regression --input-path data/housing.csv --alpha 1e-8 --iterations 100000 --predict 3343 8
gd-regression --input-path data/housing.csv --alpha 1e-8 --threshold 1e-9 --verbose
```
"""

import argparse
import os

from .cost import cost
from .data import load_dataset
from .exceptions import DivergenceError
from .solver import solve_iterations, solve_threshold
from .utils import add_intercept, as_column


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fit a linear regression model by batch gradient descent"
    )
    parser.add_argument(
        "--input-path",
        type=str,
        required=True,
        help="Path to CSV file with a header row",
    )
    parser.add_argument(
        "--target-column",
        type=str,
        default=None,
        help="Name of the target column (default: last column)",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=0.01,
        help="Learning rate (default: 0.01)",
    )
    stopping = parser.add_mutually_exclusive_group(required=True)
    stopping.add_argument(
        "--iterations",
        type=int,
        help="Perform exactly this many updates",
    )
    stopping.add_argument(
        "--threshold",
        type=float,
        help="Stop once an update improves the cost by at most this amount",
    )
    parser.add_argument(
        "--divergence-tolerance",
        type=float,
        default=None,
        help="With --threshold, fail if an update increases the cost by more than this",
    )
    parser.add_argument(
        "--predict",
        type=float,
        nargs="+",
        default=None,
        help="Feature values of a row to predict after fitting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not os.path.exists(args.input_path):
        parser.error(f"Input file not found: {args.input_path}")
    if args.iterations is not None and args.iterations < 0:
        parser.error("--iterations must be non-negative")

    dataset = load_dataset(
        args.input_path, target_column=args.target_column, verbose=args.verbose
    )

    print("\n=== Fitting Linear Model ===")
    print(f"Samples: {len(dataset)}, features: {', '.join(dataset.feature_names)}")
    print(f"Learning rate: {args.alpha}")

    if args.iterations is not None:
        print(f"Iterations: {args.iterations}\n")
        model = solve_iterations(
            dataset.X, dataset.y, args.alpha, args.iterations, verbose=args.verbose
        )
    else:
        print(f"Threshold: {args.threshold}\n")
        try:
            model = solve_threshold(
                dataset.X,
                dataset.y,
                args.alpha,
                args.threshold,
                divergence_tolerance=args.divergence_tolerance,
                verbose=args.verbose,
            )
        except DivergenceError as e:
            print(f"Error: {e}")
            return 1

    final_cost = cost(
        as_column(model.get_params()), add_intercept(dataset.X), dataset.y
    )
    print(f"Parameters: {model.get_params()}")
    print(f"Final cost: {final_cost}")

    if args.predict is not None:
        prediction = model.predict(args.predict)
        print(f"Prediction for {args.predict}: {prediction}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
