from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ergplanner.config import Config, get_config


def test_defaults_without_config_file() -> None:
    config = get_config()

    assert config.get_reserved_sheet() == "Rider"
    assert config.get_output_dir() == "."
    assert config.get_summary_name_width() == 24
    assert get_config() is config


def test_config_file_overrides_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("reserved_sheet: Cover\nsummary_name_width: 30\n", encoding="utf-8")

    config = Config(str(config_file))

    assert config.get_reserved_sheet() == "Cover"
    assert config.get_summary_name_width() == 30
    assert config.get_output_dir() == "."


def test_invalid_config_file_keeps_defaults(tmp_path: Path, caplog) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("reserved_sheet: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = Config(str(config_file))

    assert config.get_reserved_sheet() == "Rider"
    assert "Error loading configuration file" in caplog.text


def test_set_persists_value(tmp_path: Path) -> None:
    config_file = tmp_path / "nested" / "config.yaml"
    config = Config(str(config_file))

    assert config.set("output_dir", "~/erg")

    saved = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    assert saved["output_dir"] == "~/erg"
    assert Config(str(config_file)).get_output_dir().endswith("erg")
