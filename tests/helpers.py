from core.settings import Settings


def make_settings(**overrides) -> Settings:
    values = {"PORT": 8080, "API_MODE": "test", "CORS_ORIGINS": "http://localhost:3000"}
    values.update(overrides)
    return Settings(_env_file=None, **values)
