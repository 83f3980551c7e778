import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).parent
DEFAULT_STATIC_DIR = PACKAGE_DIR / "public"
PAGES_DIR = PACKAGE_DIR / "pages"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
CHECKOUT_CURRENCY = "eur"
DEFAULT_ITEM_NAME = "Product"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and shared by reference."""

    stripe_secret_key: Optional[str] = None
    stripe_publishable_key: Optional[str] = None
    stripe_webhook_secret: Optional[str] = None
    base_url: str = f"http://localhost:{DEFAULT_PORT}"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    static_dir: Path = DEFAULT_STATIC_DIR
    log_level: str = "INFO"

    def redirect_url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"


def _optional(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from the environment.

    A ``.env`` file in the working directory is loaded first when reading the real
    process environment. Missing Stripe secrets are kept as ``None``; the endpoints
    that need them report the misconfiguration instead of the process refusing to start.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    port = int(environ.get("PORT", str(DEFAULT_PORT)))
    return Settings(
        stripe_secret_key=_optional(environ, "STRIPE_SECRET_KEY"),
        stripe_publishable_key=_optional(environ, "STRIPE_PUBLISHABLE_KEY"),
        stripe_webhook_secret=_optional(environ, "STRIPE_WEBHOOK_SECRET"),
        base_url=_optional(environ, "BASE_URL") or f"http://localhost:{port}",
        host=environ.get("HOST", DEFAULT_HOST),
        port=port,
        static_dir=Path(_optional(environ, "STATIC_DIR") or DEFAULT_STATIC_DIR),
        log_level=environ.get("LOG_LEVEL", "INFO"),
    )
