from pathlib import Path

import pytest

from reading_time_estimator.config import (
    EstimatorConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config()
    assert cfg == EstimatorConfig()
    assert cfg.reading_speed == 200.0
    assert cfg.worker_count == 4
    assert cfg.has_visuals is False


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"worker_count": 8, "port": "8080"})
    assert cfg.worker_count == 8
    assert "port" not in cfg.to_dict()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("reading_speed: 250\nhas_visuals: true\n", encoding="utf-8")

    cfg = config_from_yaml(path)

    assert cfg.reading_speed == 250
    assert cfg.has_visuals is True
    assert cfg.streaming is False


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_config_from_dict_converts_quoted_scalars():
    cfg = config_from_dict(
        {"worker_count": "4", "reading_speed": "250", "has_visuals": "true"}
    )
    assert cfg.worker_count == 4
    assert cfg.reading_speed == 250.0
    assert cfg.has_visuals is True


@pytest.mark.parametrize(
    "data",
    [{"worker_count": "many"}, {"reading_speed": None}, {"streaming": "maybe"}],
)
def test_config_from_dict_rejects_unconvertible_values(data: dict):
    with pytest.raises(ValueError):
        config_from_dict(data)
