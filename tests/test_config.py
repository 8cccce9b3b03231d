"""Tests for environment-driven settings."""

from tinifier.config import MAX_UPLOAD_SIZE, Settings


def test_defaults_without_environment():
    settings = Settings.from_env({})
    assert settings.api_key is None
    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.log_level == "INFO"
    assert settings.max_upload_size == MAX_UPLOAD_SIZE == 50 * 1024 * 1024


def test_values_from_environment():
    settings = Settings.from_env({
        "TINIFY_API_KEY": "abc123",
        "PORT": "8080",
        "LOG_LEVEL": "debug",
        "MAX_UPLOAD_SIZE": "2048",
    })
    assert settings.api_key == "abc123"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.max_upload_size == 2048


def test_blank_api_key_counts_as_missing():
    assert Settings.from_env({"TINIFY_API_KEY": ""}).api_key is None


def test_json_body_limit_allows_for_base64_inflation():
    settings = Settings(max_upload_size=3000)
    assert settings.max_json_body_size == 4000 + 4096
    assert Settings(max_upload_size=1024).max_json_body_size == 1366 + 4096
