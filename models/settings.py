from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import os


def _env(name: str) -> Optional[str]:
    return os.getenv(name) or None


class Settings(BaseModel):
    """Read-only function app settings, loaded once per process."""

    model_config = ConfigDict(frozen=True)

    stripe_secret_key: Optional[str] = Field(default=None, repr=False)
    stripe_publishable_key: Optional[str] = None
    site_url: Optional[str] = None  # SITE_URL
    url: Optional[str] = None  # URL
    frontend_url: Optional[str] = None  # FRONTEND_URL
    base_url: Optional[str] = None  # BASEURL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            stripe_secret_key=_env("STRIPE_SECRET_KEY"),
            stripe_publishable_key=_env("STRIPE_PUBLISHABLE_KEY"),
            site_url=_env("SITE_URL"),
            url=_env("URL"),
            frontend_url=_env("FRONTEND_URL"),
            base_url=_env("BASEURL"),
        )
