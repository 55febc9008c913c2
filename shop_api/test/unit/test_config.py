# shop_api/test/unit/test_config.py

# Para rodar o script
# pytest shop_api/test/unit/test_config.py

import pytest
from pydantic import ValidationError

from shop_api.adapters.configuration.config import Settings


def test_secret_key_is_required(monkeypatch):
    """
    Sem SECRET_KEY a aplicação não sobe: não existe segredo padrão.
    """
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert any(err["loc"] == ("SECRET_KEY",) for err in exc_info.value.errors())


@pytest.mark.parametrize("secret", ["", "   "])
def test_blank_secret_key_is_rejected(monkeypatch, secret):
    monkeypatch.setenv("SECRET_KEY", secret)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_secret_key_from_environment(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "a-real-secret")

    settings = Settings(_env_file=None)

    assert settings.SECRET_KEY.get_secret_value() == "a-real-secret"
    assert "a-real-secret" not in repr(settings)


def test_cors_origins_from_comma_separated_string(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "a-real-secret")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
