"""
Load training data from delimited text files.

The expected layout is a header row followed by one sample per row. All
columns are numeric; the target is the last column unless another one is
named.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import DimensionMismatch


@dataclass(frozen=True)
class Dataset:
    """
    Training features and targets.

    Attributes:
        X: Feature matrix of shape (n_samples, n_features), without bias column
        y: Targets of shape (n_samples, 1)
        feature_names: Column names of `X`, in order
        target_name: Column name of `y`
    """
    X: np.ndarray
    y: np.ndarray
    feature_names: Optional[List[str]] = None
    target_name: Optional[str] = None

    def __post_init__(self):
        if len(self.X) != len(self.y):
            raise DimensionMismatch(
                f"X and y must have the same number of rows. Got X: {len(self.X)}, y: {len(self.y)}"
            )

    def __len__(self):
        return len(self.y)


def load_dataset(
    file_path: str,
    target_column: Optional[str] = None,
    sep: str = ",",
    verbose: bool = False,
) -> Dataset:
    """
    Load a dataset from a CSV file with a header row.

    Args:
        file_path: Path to CSV file
        target_column: Name of the target column. Default: the last column.
        sep: Field delimiter. Default: ','.
        verbose: Print progress messages. Default: False.

    Returns:
        Dataset
    """
    if verbose:
        print(f"Loading dataset from {file_path}...")

    df = pd.read_csv(file_path, sep=sep)

    if len(df.columns) < 2:
        raise ValueError(
            f"Expected at least one feature column and one target column, got {len(df.columns)} column(s)."
        )

    if target_column is None:
        target_column = df.columns[-1]
    elif target_column not in df.columns:
        raise ValueError(f"Target column '{target_column}' not found in {file_path}.")

    non_numeric = [c for c in df.columns if not pd.api.types.is_numeric_dtype(df[c])]
    if non_numeric:
        raise ValueError(f"Non-numeric values found in column(s): {non_numeric}")

    if df.isna().any().any():
        n_missing = int(df.isna().sum().sum())
        raise ValueError(f"Found {n_missing} missing value(s) in {file_path}.")

    feature_names = [c for c in df.columns if c != target_column]
    X = df[feature_names].to_numpy(dtype=float)
    y = df[[target_column]].to_numpy(dtype=float)

    if verbose:
        print(f"  Loaded {len(df)} rows with {len(feature_names)} feature(s)")

    return Dataset(X=X, y=y, feature_names=feature_names, target_name=target_column)
