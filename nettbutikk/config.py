"""Runtime configuration read from environment variables."""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CATALOG_URL = "https://fakestoreapi.com/products"
DEFAULT_CATALOG_TIMEOUT = 10.0

_FALSE_VALUES = ("0", "false", "no", "off")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_bool(name: str, default: Optional[bool]) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class Settings:
    """
    Shop settings.

    catalog_strict: reject catalog records carrying fields beyond
    id/title/description/price. Left unset (None), decoding is strict for
    every endpoint except the default public feed, which always sends
    category, image and rating.
    """
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_timeout: float = DEFAULT_CATALOG_TIMEOUT
    catalog_strict: Optional[bool] = None

    @property
    def decode_strict(self) -> bool:
        if self.catalog_strict is not None:
            return self.catalog_strict
        return self.catalog_url != DEFAULT_CATALOG_URL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            catalog_url=os.environ.get("CATALOG_URL") or DEFAULT_CATALOG_URL,
            catalog_timeout=_env_float("CATALOG_TIMEOUT", DEFAULT_CATALOG_TIMEOUT),
            catalog_strict=_env_bool("CATALOG_STRICT", None),
        )
