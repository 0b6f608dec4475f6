""" Test the config file. """
from newsdigest.utils.config import DEFAULT_CONFIG, load_config


def test_config_has_required_fields(monkeypatch):
    for key in DEFAULT_CONFIG:
        monkeypatch.delenv(f"NEWSDIGEST_{key.upper()}", raising=False)
    config = load_config(configure_logging=False)

    assert config["fetch_delay_seconds"] == 0.3
    assert config["request_timeout"] is None
    assert config["debug"] is False
    assert "Mozilla/5.0" in config["user_agent"]
    assert config["accept"].startswith("text/html")


def test_config_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch_delay_seconds: 2\nrequest_timeout: 15\n")

    config = load_config(str(path), configure_logging=False)

    assert config["fetch_delay_seconds"] == 2
    assert config["request_timeout"] == 15
    assert config["user_agent"] == DEFAULT_CONFIG["user_agent"]


def test_environment_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("fetch_delay_seconds: 2\n")
    monkeypatch.setenv("NEWSDIGEST_FETCH_DELAY_SECONDS", "0.75")
    monkeypatch.setenv("NEWSDIGEST_DEBUG", "true")

    config = load_config(str(path), configure_logging=False)

    assert config["fetch_delay_seconds"] == 0.75
    assert config["debug"] is True


def test_missing_config_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.yaml"), configure_logging=False)
    assert config["fetch_delay_seconds"] == DEFAULT_CONFIG["fetch_delay_seconds"]
