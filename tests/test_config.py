import pytest
from pydantic import ValidationError

from geoserver_rest import GeoServerClient, load_settings
from geoserver_rest.config import ENV_OVERRIDES, GeoServerSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_from_yaml(tmp_path):
    config = tmp_path / "geoserver.yml"
    config.write_text(
        "url: http://localhost:8080/geoserver/rest\nusername: admin\npassword: geoserver\ntimeout_seconds: 5\n",
        encoding="utf-8",
    )

    settings = load_settings(config)

    assert settings == GeoServerSettings(
        url="http://localhost:8080/geoserver/rest", username="admin", password="geoserver", timeout_seconds=5
    )


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    config = tmp_path / "geoserver.yml"
    config.write_text("url: http://localhost:8080/geoserver/rest\nusername: admin\n", encoding="utf-8")
    monkeypatch.setenv("GEOSERVER_URL", "https://maps.example.org/geoserver/rest")
    monkeypatch.setenv("GEOSERVER_TIMEOUT_SECONDS", "12.5")

    settings = load_settings(config)

    assert settings.url == "https://maps.example.org/geoserver/rest"
    assert settings.username == "admin"
    assert settings.timeout_seconds == 12.5


def test_missing_file_falls_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GEOSERVER_URL", "http://gs/rest")

    settings = load_settings()

    assert settings.url == "http://gs/rest"
    assert settings.timeout_seconds == 30


def test_default_config_is_read_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "geoserver.yml").write_text("url: http://cwd/rest\ntimeout_seconds: 7\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.url == "http://cwd/rest"
    assert settings.timeout_seconds == 7


def test_invalid_settings_raise(tmp_path):
    config = tmp_path / "geoserver.yml"
    config.write_text("username: admin\ntimeout_seconds: 0\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_settings(config)


def test_password_is_not_in_repr():
    settings = GeoServerSettings(url="http://gs/rest", password="hunter2")
    assert "hunter2" not in repr(settings)


def test_client_from_settings():
    settings = GeoServerSettings(url="http://gs/rest/", username="admin", password="geoserver", timeout_seconds=3)

    with GeoServerClient.from_settings(settings) as gs:
        assert gs.url == "http://gs/rest"
        assert gs.username == "admin"
        assert gs.http_client.timeout.read == 3
