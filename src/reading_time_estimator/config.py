from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class EstimatorConfig:
    """Default parameters for reading-time estimation runs."""

    reading_speed: float = 200.0
    has_visuals: bool = False
    worker_count: int = 4
    streaming: bool = False
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def config_from_dict(data: Mapping[str, Any] | None) -> EstimatorConfig:
    """
    Build an EstimatorConfig from a dictionary-like input, ignoring unknown keys.

    Values are converted to the field types, so quoted YAML scalars such as
    ``worker_count: "4"`` are accepted. Unconvertible values raise ValueError.
    """
    if data is None:
        return EstimatorConfig()
    defaults = EstimatorConfig()
    kwargs: dict[str, Any] = {}
    for field in fields(EstimatorConfig):
        if field.name in data:
            kwargs[field.name] = _coerce(
                field.name, data[field.name], type(getattr(defaults, field.name))
            )
    return EstimatorConfig(**kwargs)


def _coerce(name: str, value: Any, target: type) -> Any:
    if target is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
            return True
        if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
            return False
        raise ValueError(f"Config value {name}={value!r} is not a boolean.")
    if value is None or isinstance(value, bool):
        raise ValueError(f"Config value {name}={value!r} is not a {target.__name__}.")
    try:
        return target(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Config value {name}={value!r} is not a {target.__name__}."
        ) from exc


def config_from_yaml(path: str | Path) -> EstimatorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EstimatorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EstimatorConfig()
    return config_from_yaml(path)
