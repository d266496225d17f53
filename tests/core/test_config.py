from src.core.config import ValueDeliverySettings


def test_defaults(monkeypatch):
    for name in ("ENABLED", "DEBUG", "TAXONOMY_PATH", "MIN_RESPONSES"):
        monkeypatch.delenv(f"VALUE_DELIVERY_{name}", raising=False)

    settings = ValueDeliverySettings()
    assert settings.enabled is True
    assert settings.debug is False
    assert settings.taxonomy_path is None
    assert settings.min_responses == 3
    assert settings.key_response_slots == ["response1", "response4", "response6"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VALUE_DELIVERY_ENABLED", "false")
    monkeypatch.setenv("VALUE_DELIVERY_MIN_RESPONSES", "5")
    monkeypatch.setenv("VALUE_DELIVERY_TAXONOMY_PATH", "/etc/keywords.yml")
    monkeypatch.setenv("VALUE_DELIVERY_KEY_RESPONSE_SLOTS", '["response9"]')

    settings = ValueDeliverySettings()
    assert settings.enabled is False
    assert settings.min_responses == 5
    assert settings.taxonomy_path == "/etc/keywords.yml"
    assert settings.key_response_slots == ["response9"]
