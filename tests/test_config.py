import pytest

from component_injector.config import InjectorConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("COMPONENT_INJECTOR_DUPLICATES", raising=False)
    monkeypatch.delenv("COMPONENT_INJECTOR_INCLUDE_PRIVATE", raising=False)


def test_defaults():
    config = InjectorConfig()

    assert config.duplicates == "replace"
    assert config.include_private is False


def test_duplicate_policy_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("COMPONENT_INJECTOR_DUPLICATES", "ERROR")

    assert InjectorConfig().duplicates == "error"


@pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("On", True), ("no", False), ("", False)])
def test_include_private_is_read_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("COMPONENT_INJECTOR_INCLUDE_PRIVATE", value)

    assert InjectorConfig().include_private is expected


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("COMPONENT_INJECTOR_DUPLICATES", "error")

    assert InjectorConfig(duplicates="warn").duplicates == "warn"


def test_rejects_unknown_duplicate_policy():
    with pytest.raises(ValueError, match="Unknown duplicate policy"):
        InjectorConfig(duplicates="first")


def test_rejects_unknown_duplicate_policy_from_environment(monkeypatch):
    monkeypatch.setenv("COMPONENT_INJECTOR_DUPLICATES", "first")

    with pytest.raises(ValueError, match="Unknown duplicate policy"):
        InjectorConfig()
