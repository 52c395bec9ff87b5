"""Tests for environment driven defaults."""
import pytest

from play.program.exceptions import ConfigurationException
from play.program.settings.manager import SettingsManager
from play.program.settings.models import RunConfiguration
from play.program.utils.cli import handle_args


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SPEED", "PORT", "HOST", "OPEN_BROWSER", "LOG_LEVEL"):
        monkeypatch.delenv(f"PLAY_{name}", raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env):
    assert SettingsManager().load() == {
        "speed": 1.0,
        "port": 9876,
        "host": "127.0.0.1",
        "open_browser": True,
        "log_level": "INFO",
    }


def test_environment_overrides(clean_env, media_file):
    clean_env.setenv("PLAY_SPEED", "2.5")
    clean_env.setenv("PLAY_PORT", "8000")
    clean_env.setenv("PLAY_OPEN_BROWSER", "false")
    clean_env.setenv("PLAY_LOG_LEVEL", "debug")

    config = handle_args([str(media_file)])

    assert config.speed == 2.5
    assert config.port == 8000
    assert config.open_browser is False
    assert config.log_level == "DEBUG"


def test_environment_is_read_on_load(clean_env):
    manager = SettingsManager()
    clean_env.setenv("PLAY_PORT", "8000")

    assert manager.load()["port"] == 8000


def test_unparseable_environment_value_raises(clean_env):
    clean_env.setenv("PLAY_PORT", "not-a-port")

    with pytest.raises(ValueError):
        SettingsManager().load()


def test_overridden_fields_skip_the_environment(clean_env):
    clean_env.setenv("PLAY_PORT", "not-a-port")

    assert SettingsManager().load(port=8000)["port"] == 8000


def test_out_of_range_environment_value_is_a_configuration_error(clean_env, media_file):
    clean_env.setenv("PLAY_SPEED", "0")

    with pytest.raises(ConfigurationException, match="speed"):
        handle_args([str(media_file)])


def test_cli_flags_override_environment(clean_env, media_file):
    clean_env.setenv("PLAY_SPEED", "2.5")
    clean_env.setenv("PLAY_PORT", "8000")

    from_env = handle_args([str(media_file)])
    from_cli = handle_args([str(media_file), "-s", "0.5"])

    assert from_env.speed == 2.5
    assert from_env.port == 8000
    assert from_cli.speed == 0.5
    assert from_cli.port == 8000


def test_no_browser_flag_overrides_environment(clean_env, media_file):
    clean_env.setenv("PLAY_OPEN_BROWSER", "true")

    assert handle_args([str(media_file)]).open_browser is True
    assert handle_args([str(media_file), "--no-browser"]).open_browser is False


@pytest.mark.parametrize(
    "host, url",
    [
        ("127.0.0.1", "http://localhost:9876"),
        ("0.0.0.0", "http://localhost:9876"),
        ("::1", "http://localhost:9876"),
        ("192.168.1.20", "http://192.168.1.20:9876"),
        ("fe80::1", "http://[fe80::1]:9876"),
    ],
)
def test_run_configuration_url(media_file, host, url):
    config = RunConfiguration(path=media_file, host=host)

    assert config.url == url
