from .dataset import Dataset
from .points import as_points, is_signed_numeric, validate_means
from .validation import validate_dataset

__all__ = [
    "Dataset",
    "as_points",
    "is_signed_numeric",
    "validate_means",
    "validate_dataset",
]
