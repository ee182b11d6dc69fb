"""Settings loading."""

from vibe_cart.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 4000
    assert settings.api_prefix == "/api"
    assert settings.storage_backend == "sqlite"
    assert settings.demo_user_id == "demo"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VIBE_CART_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("VIBE_CART_DEMO_USER_ID", "alice")
    monkeypatch.setenv("VIBE_CART_PORT", "5050")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "memory"
    assert settings.demo_user_id == "alice"
    assert settings.port == 5050
