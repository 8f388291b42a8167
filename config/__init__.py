import os

_ENV_MODULES = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
    "development": "config.development",
    "dev": "config.development",
    "local": "config.development",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; unknown values fall back to development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
