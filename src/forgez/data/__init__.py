"""Data layer utilities for loading JSON definitions and session snapshots."""

from .errors import (
    DataError,
    DataLoadError,
    DataReferenceError,
    DataValidationError,
    SessionStoreError,
)
from .paths import get_definitions_path, get_package_data_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "SessionStoreError",
    "get_definitions_path",
    "get_package_data_root",
]
