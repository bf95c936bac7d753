"""
Fit linear and quadratic highway fuel economy models on one model year and
evaluate them on another.

Input file expected:
- CSV with columns displ, cyl, hwy and year (case-insensitive)

Output:
- Summary table of coefficients and test/cross-validated errors (printed)
- Optional observed-vs-predicted and residual plots per model

```bash
python scripts/run_experiments.py --data-path data/vehicles.csv --train-year 2010 --test-year 2011 --folds 10 --verbose
```
"""

import os
import argparse

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from fuel_economy.data import load_fuel_economy_data
from fuel_economy.fitting import KFoldResampling
from fuel_economy.inference import coefficient_table
from fuel_economy.plotting import plot_predictions, plot_residuals, save_fig
from fuel_economy.utils import train_test_split
from fuel_economy.workflow import compare_models, prepare_features


def main():
    parser = argparse.ArgumentParser(
        description="Train on one model year, predict another"
    )
    parser.add_argument(
        "--data-path",
        type=str,
        required=True,
        help="Path to fuel economy CSV file",
    )
    parser.add_argument(
        "--train-year",
        type=int,
        default=2010,
        help="Model year to train on (default: 2010)",
    )
    parser.add_argument(
        "--test-year",
        type=int,
        default=2011,
        help="Model year to evaluate on (default: 2011)",
    )
    parser.add_argument(
        "--folds",
        type=int,
        default=None,
        help="Number of cross-validation folds (default: no cross-validation)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for fold assignment (default: 0)",
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        default=None,
        help="Directory to save plots to (default: no plots)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )

    args = parser.parse_args()

    print("\n=== Fuel Economy Regression ===")
    print(f"Input file: {args.data_path}")
    print(f"Train year: {args.train_year}, test year: {args.test_year}\n")

    if not os.path.exists(args.data_path):
        raise FileNotFoundError(f"Input file not found: {args.data_path}")

    df = load_fuel_economy_data(args.data_path, verbose=args.verbose)
    df_train, df_test = train_test_split(df, args.train_year, args.test_year)
    print(f"Training records: {len(df_train)}, test records: {len(df_test)}")

    resampling = None
    if args.folds is not None:
        resampling = KFoldResampling(k=args.folds, seed=args.seed)

    results, summary = compare_models(
        df_train, df_test, resampling=resampling, verbose=args.verbose
    )

    print("\n=== Summary ===")
    print(summary.to_string(float_format=lambda x: f"{x:.4f}"))

    for name, result in results.items():
        table = coefficient_table(
            prepare_features(df_train, result.config), result.config.feature_set
        )
        print(f"\n{name} model (R^2 = {table.attrs['r_squared']:.4f}):")
        print(table.to_string(float_format=lambda x: f"{x:.4g}"))

    if args.plot_dir is not None:
        for name, result in results.items():
            title = f"{name} model: trained {args.train_year}, tested {args.test_year}"
            ax = plot_predictions(result.prediction, title=title)
            path = save_fig(ax, os.path.join(args.plot_dir, f"{name}_predictions.png"))
            plt.close(ax.get_figure())
            print(f"Saved {path}") if args.verbose else None

            ax = plot_residuals(result.prediction, title=title)
            path = save_fig(ax, os.path.join(args.plot_dir, f"{name}_residuals.png"))
            plt.close(ax.get_figure())
            print(f"Saved {path}") if args.verbose else None


if __name__ == "__main__":
    main()
