"""
reading_time_estimator package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EstimatorConfig, config_from_dict, config_from_yaml, load_config
from .errors import EstimationError, InvalidInputError, SourceReadError
from .estimation import (
    estimate_from_file,
    estimate_from_source,
    estimate_parallel,
    read_text,
)
from .models import EstimationResult

__all__ = [
    "EstimatorConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "EstimationError",
    "InvalidInputError",
    "SourceReadError",
    "EstimationResult",
    "estimate_parallel",
    "estimate_from_source",
    "estimate_from_file",
    "read_text",
]

__version__ = "0.1.0"
