from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reactorplanner import PlannerConfig, apply_config, load_config
from reactorplanner.logging_utils import get_log_level

if TYPE_CHECKING:
    from pathlib import Path


def test_missing_file_returns_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = load_config(tmp_path / "missing.toml")

    assert config == PlannerConfig()
    assert "[warn]" in capsys.readouterr().out


def test_reads_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "planner.toml"
    path.write_text('location_tracking = true\nlog_level = "DEBUG"\nunrelated = 1\n', encoding="utf-8")

    config = load_config(path)

    assert config.location_tracking is True
    assert config.log_level == "debug"


def test_invalid_toml_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "planner.toml"
    path.write_text("this is not toml\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(path)


def test_wrong_type_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "planner.toml"
    path.write_text('location_tracking = "yes"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="location_tracking"):
        load_config(path)


def test_apply_config_sets_log_level() -> None:
    apply_config(PlannerConfig(log_level="warn"))

    assert get_log_level() == "warn"


def test_apply_config_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        apply_config(PlannerConfig(log_level="loud"))
