import pytest

from naming import DefaultNameBuilder, Settings, get_settings

ENV_KEYS = [
    "NAMING_LOG_LEVEL",
    "NAMING_LOG_JSON",
    "NAMING_MIN_LENGTH",
    "NAMING_MAX_LENGTH",
    "NAMING_CHAR_VALIDATION",
    "NAMING_TRIM_VALIDATION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()
    assert settings == Settings()
    assert settings.log_level == "INFO"
    assert (settings.name_min_length, settings.name_max_length) == (2, 512)
    assert settings.name_char_validation and settings.name_trim_validation


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NAMING_LOG_LEVEL", "debug")
    monkeypatch.setenv("NAMING_LOG_JSON", "no")
    monkeypatch.setenv("NAMING_MIN_LENGTH", "3")
    monkeypatch.setenv("NAMING_MAX_LENGTH", "none")
    monkeypatch.setenv("NAMING_TRIM_VALIDATION", "false")

    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.name_min_length == 3
    assert settings.name_max_length is None
    assert settings.name_trim_validation is False
    assert settings.name_char_validation is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "key, value",
    [
        ("NAMING_LOG_LEVEL", "chatty"),
        ("NAMING_MIN_LENGTH", "two"),
        ("NAMING_MIN_LENGTH", "-1"),
        ("NAMING_MAX_LENGTH", "1"),
    ],
)
def test_rejects_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError):
        get_settings()


def test_builder_from_settings():
    builder = DefaultNameBuilder.from_settings(
        Settings(name_min_length=None, name_max_length=10, name_char_validation=False)
    )
    assert builder == DefaultNameBuilder(min_length=None, max_length=10, char_validation_enabled=False)
    assert builder.validate("Hello").is_success()
    assert builder.validate("x" * 11).is_failure()


def test_ignores_dotenv_files(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("NAMING_MIN_LENGTH=7\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert get_settings().name_min_length == 2
