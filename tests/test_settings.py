"""Tests for configuration resolution, file loading and CLI overrides."""

from pathlib import Path

import pytest

from termclock.cli import parse_overrides
from termclock.config.settings import Config, load_config, parse_color, resolve_config
from termclock.shared.config import get_config_path, load_yaml_config


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config()
        assert config == Config()
        assert config.time_scale_x == 2
        assert config.time_scale_y == 2
        assert config.date_scale_x == 1
        assert config.device_code == "SENS-FARM01"
        assert config.temp_refresh_interval == 5
        assert config.todo_limit == 4
        assert config.main_window_percent == 80
        assert config.chime_enabled is True
        assert config.api_base_url is None

    def test_file_with_one_key_keeps_other_defaults(self):
        config = resolve_config({"chime_enabled": False})
        assert config.chime_enabled is False
        assert config.device_code == "SENS-FARM01"
        assert config.temp_refresh_interval == 5

    def test_override_beats_file_beats_default(self):
        config = resolve_config(
            {"device_code": "FILE-01", "todo_limit": 7},
            {"device_code": "CLI-01"},
        )
        assert config.device_code == "CLI-01"
        assert config.todo_limit == 7
        assert config.temp_refresh_interval == 5

    def test_none_override_does_not_clobber_file(self):
        config = resolve_config({"api_base_url": "http://api"}, {"api_base_url": None})
        assert config.api_base_url == "http://api"

    @pytest.mark.parametrize("value", [0, -3, "abc", 2.5, True, [], ""])
    def test_invalid_numbers_fall_back(self, value):
        config = resolve_config({"temp_refresh_interval": value})
        assert config.temp_refresh_interval == 5

    def test_numeric_string_is_accepted(self):
        assert resolve_config({"temp_refresh_interval": " 12 "}).temp_refresh_interval == 12

    def test_invalid_value_only_affects_its_key(self):
        config = resolve_config({"todo_limit": -1, "todo_task_max_chars": 40})
        assert config.todo_limit == 4
        assert config.todo_task_max_chars == 40

    def test_invalid_override_falls_back_to_file(self):
        config = resolve_config({"temp_refresh_interval": 30}, {"temp_refresh_interval": 0})
        assert config.temp_refresh_interval == 30

    def test_strings_are_trimmed(self):
        config = resolve_config({"api_base_url": "  http://api:8080  ", "todos_file": "   "})
        assert config.api_base_url == "http://api:8080"
        assert config.todos_file is None

    @pytest.mark.parametrize("value,expected", [(60, 60), (100, 100), (150, 80), (0, 80)])
    def test_main_window_percent(self, value, expected):
        assert resolve_config({"main_window_percent": value}).main_window_percent == expected

    def test_colors(self):
        config = resolve_config({"time_color": "LightRed", "date_color": "purple", "todos_color": "orange"})
        assert config.time_color == "bright_red"
        assert config.date_color == "yellow"
        assert config.todos_color == "#ffa500"

    def test_chime_requires_boolean(self):
        assert resolve_config({"chime_enabled": "no"}).chime_enabled is True

    def test_unknown_keys_ignored(self):
        assert resolve_config({"qr_code": "yes", "weather": {"city": "x"}}) == Config()

    def test_log_level(self):
        assert resolve_config({"log_level": "debug"}).log_level == "DEBUG"
        assert resolve_config({"log_level": "loud"}).log_level == "INFO"

    def test_todo_database_falls_back_to_mysql_url(self):
        config = resolve_config({"mysql_url": "mysql://a/b"})
        assert config.todo_database_url == "mysql://a/b"
        config = resolve_config({"mysql_url": "mysql://a/b", "todo_db_url": "mysql://c/d"})
        assert config.todo_database_url == "mysql://c/d"

    def test_config_invariants(self):
        with pytest.raises(ValueError):
            Config(time_scale_x=0)
        with pytest.raises(ValueError):
            Config(main_window_percent=101)

    def test_config_is_immutable(self):
        with pytest.raises(AttributeError):
            Config().device_code = "X"  # type: ignore[misc]


def test_parse_color():
    assert parse_color("white") == "bright_white"
    assert parse_color(" Grey ") == "white"
    assert parse_color("yello") == "yellow"
    assert parse_color("mauve") is None


class TestConfigFile:
    def test_env_var_selects_path(self, workdir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERMCLOCK_CONFIG", "/etc/termclock/custom.yml")
        assert get_config_path(load_env=False) == Path("/etc/termclock/custom.yml")

    def test_default_path_when_present(self, workdir: Path):
        (workdir / "termclock.yml").write_text("device_code: X\n")
        assert get_config_path(load_env=False) == Path("termclock.yml")

    def test_fallback_literal(self, workdir: Path):
        assert get_config_path(load_env=False) == Path("conf.yaml")

    def test_missing_file(self, workdir: Path):
        assert load_yaml_config(workdir / "nope.yml", load_env=False) is None

    def test_invalid_yaml(self, workdir: Path):
        path = workdir / "bad.yml"
        path.write_text("api_base_url: [unclosed\n")
        assert load_yaml_config(path, load_env=False) is None

    def test_non_mapping(self, workdir: Path):
        path = workdir / "list.yml"
        path.write_text("- a\n- b\n")
        assert load_yaml_config(path, load_env=False) is None

    def test_load_config_from_file(self, workdir: Path):
        path = workdir / "termclock.yml"
        path.write_text(
            "api_base_url: http://10.0.0.5:8080\n"
            "device_code: SENS-SHED\n"
            "temp_refresh_interval: 30\n"
            "todo_limit: 0\n"
            "time_color: cyan\n"
        )
        config = load_config(overrides={"device_code": "SENS-CLI"})
        assert config.api_base_url == "http://10.0.0.5:8080"
        assert config.device_code == "SENS-CLI"
        assert config.temp_refresh_interval == 30
        assert config.todo_limit == 4
        assert config.time_color == "cyan"

    def test_explicit_path_is_remembered(self, workdir: Path):
        path = workdir / "elsewhere.yml"
        path.write_text("device_code: SENS-SHED\nconfig_path: /etc/other.yml\n")
        config_path, overrides = parse_overrides(["--config", str(path)])

        config = load_config(config_path, overrides)

        assert config.device_code == "SENS-SHED"
        assert config.config_path == str(path)

    def test_load_config_without_file(self, workdir: Path):
        assert load_config() == Config()


class TestParseOverrides:
    def test_no_arguments(self):
        assert parse_overrides([]) == (None, {})

    def test_scale_sets_time_and_date(self):
        _, overrides = parse_overrides(["--scale", "3"])
        assert overrides == {"time_scale_x": 3, "time_scale_y": 3, "date_scale_x": 2}

    def test_scale_clamped(self):
        _, overrides = parse_overrides(["--scale", "0", "--time-scale-y", "-2"])
        assert overrides == {"time_scale_x": 1, "time_scale_y": 1, "date_scale_x": 1}

    def test_specific_scale_beats_scale(self):
        _, overrides = parse_overrides(["--scale", "3", "--time-scale-x", "5"])
        assert overrides["time_scale_x"] == 5
        assert overrides["time_scale_y"] == 3

    def test_unknown_color_dropped(self):
        _, overrides = parse_overrides(["--time-color", "purple", "--date-color", "cyan"])
        assert overrides == {"date_color": "cyan"}

    def test_sources_and_chime(self):
        path, overrides = parse_overrides(
            ["--config", "my.yml", "--no-chime", "--todo-ip", "10.0.0.9", "--mysql-url", "mysql://u@h/db"]
        )
        assert path == "my.yml"
        assert overrides == {
            "chime_enabled": False,
            "todo_ip_filter": "10.0.0.9",
            "mysql_url": "mysql://u@h/db",
        }

    def test_overrides_resolve(self):
        _, overrides = parse_overrides(["--scale", "4", "--time-color", "green", "--no-chime"])
        config = resolve_config({"time_scale_x": 9, "chime_enabled": True}, overrides)
        assert config.time_scale_x == 4
        assert config.date_scale_x == 3
        assert config.time_color == "green"
        assert config.chime_enabled is False
