"""Training data loading and validation."""

from .loading import Dataset, load_dataset
from .validation import validate_features, validate_targets, validate_training_data

__all__ = [
    "Dataset",
    "load_dataset",
    "validate_features",
    "validate_targets",
    "validate_training_data",
]
