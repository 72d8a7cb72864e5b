import os

from dotenv import find_dotenv
from dotenv import load_dotenv as _load_dotenv

# Defaults for the build and web entry points. Real environment variables
# and .env entries take precedence.
DEFAULTS = {
    "BRAND_ASSETS_DIR": "web/icons",
    "BRAND_MANIFEST_OUTPUT": "web/manifest.json",
    "BRAND_ICON_BASE_URL": "icons/",
    "WEB_UI_HOST": "localhost",
    "WEB_UI_PORT": "8080",
}


def load_dotenv(path: str | None = None) -> bool:
    """Load variables from .env without overriding the real environment."""
    dotenv_path = path or find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return _load_dotenv(dotenv_path, override=False)


def get_dotenv_value(key: str, default: str | None = None) -> str | None:
    value = os.getenv(key)
    if value:
        return value
    if default is not None:
        return default
    return DEFAULTS.get(key)
