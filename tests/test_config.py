"""Tests for configuration loading."""

import pytest

from mediameta.config import DEFAULT_MEDIAINFO_BIN, MediaMetaConfig, load_config


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Keep the user's config files and environment out of these tests."""
    monkeypatch.delenv("MEDIAMETA_MEDIAINFO_BIN", raising=False)
    monkeypatch.setattr("mediameta.config.CONFIG_LOCATIONS", [tmp_path / "none.yaml"])


def test_defaults():
    """Test the default binary name."""
    assert load_config() == MediaMetaConfig()
    assert load_config().mediainfo_bin == DEFAULT_MEDIAINFO_BIN == "mediainfo"


def test_yaml_file(tmp_path):
    """Test the binary can be set from a YAML file."""
    path = tmp_path / "config.yaml"
    path.write_text("mediainfo:\n  binary: /opt/mediainfo/bin/mediainfo\n")
    assert load_config(path).mediainfo_bin == "/opt/mediainfo/bin/mediainfo"


def test_search_locations(monkeypatch, tmp_path):
    """Test the first existing search location is used."""
    second = tmp_path / "second.yaml"
    second.write_text("mediainfo:\n  binary: /usr/local/bin/mediainfo\n")
    monkeypatch.setattr(
        "mediameta.config.CONFIG_LOCATIONS", [tmp_path / "missing.yaml", second]
    )
    assert load_config().mediainfo_bin == "/usr/local/bin/mediainfo"


def test_environment_wins(monkeypatch, tmp_path):
    """Test MEDIAMETA_MEDIAINFO_BIN overrides the config file."""
    path = tmp_path / "config.yaml"
    path.write_text("mediainfo:\n  binary: /opt/mediainfo/bin/mediainfo\n")
    monkeypatch.setenv("MEDIAMETA_MEDIAINFO_BIN", "/env/mediainfo")
    assert load_config(path).mediainfo_bin == "/env/mediainfo"


def test_empty_file(tmp_path):
    """Test an empty YAML file gives defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == MediaMetaConfig()


def test_invalid_yaml_warns(tmp_path):
    """Test a broken config file is skipped with a warning."""
    path = tmp_path / "config.yaml"
    path.write_text("mediainfo: [unclosed\n")
    with pytest.warns(UserWarning, match="Ignoring config file"):
        config = load_config(path)
    assert config == MediaMetaConfig()


def test_non_mapping_section(tmp_path):
    """Test a scalar mediainfo section is ignored."""
    path = tmp_path / "config.yaml"
    path.write_text("mediainfo: /opt/mediainfo\n")
    assert load_config(path) == MediaMetaConfig()
