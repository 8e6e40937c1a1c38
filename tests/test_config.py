"""
Tests for configuration discovery and validation.
"""

import pytest

from plengi_installer.config import DEFAULTS, get_config_value, get_settings, load_config
from plengi_installer.exceptions import ConfigError


def test_defaults_without_config_file(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    assert load_config() is None
    assert get_settings() == DEFAULTS
    assert get_config_value("sdk.module", "fallback") == "fallback"


def test_project_file_overrides_defaults(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    (temp_dir / "plengi.toml").write_text('[project]\nskip_dirs = [".git", ".build", "Pods"]\n')

    settings = get_settings()

    assert settings["project"]["skip_dirs"] == [".git", ".build", "Pods"]
    assert settings["sdk"] == DEFAULTS["sdk"]
    assert get_config_value("project.skip_dirs") == [".git", ".build", "Pods"]


def test_env_var_takes_priority(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    (temp_dir / "plengi.toml").write_text('[sdk]\nmodule = "FromProject"\n')
    env_file = temp_dir / "env.toml"
    env_file.write_text('[sdk]\nmodule = "FromEnv"\n')
    monkeypatch.setenv("PLENGI_CONFIG", str(env_file))

    assert get_settings()["sdk"]["module"] == "FromEnv"


def test_overrides_do_not_mutate_defaults():
    get_settings({"project": {"skip_dirs": ["x"]}})
    assert DEFAULTS["project"]["skip_dirs"] == [".git", ".build"]


@pytest.mark.parametrize("overrides", [
    {"sdk": {"module": "  "}},
    {"project": {"bundle_suffixes": ["xcodeproj"]}},
    {"project": {"skip_dirs": ".git"}},
    {"entry_point": {"root_marker": ""}},
])
def test_invalid_settings(overrides):
    with pytest.raises(ConfigError):
        get_settings(overrides)


def test_invalid_toml(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    (temp_dir / "plengi.toml").write_text("[sdk\n")
    with pytest.raises(ConfigError):
        load_config()
