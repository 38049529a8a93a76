"""
Runtime configuration loaded from environment variables (or a .env file).

Settings are validated once at startup and passed explicitly to every
component; nothing else reads the environment.
"""

import os
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shared.errors import ConfigurationError

REQUIRED_VARS = {
    "BACKEND_API_ENDPOINT": "backend_api_endpoint",
    "AVAILABILITY_API_HOST": "availability_api_host",
    "RESERVATION_URL": "reservation_url",
    "POSTMARK_API_ENDPOINT": "postmark_api_endpoint",
    "POSTMARK_API_TOKEN": "postmark_api_token",
}

OPTIONAL_VARS = {
    "NOTIFICATION_FROM_EMAIL": "from_email",
    "REQUEST_TIMEOUT_SECONDS": "request_timeout",
    "AVAILABILITY_MAX_WORKERS": "availability_max_workers",
    "EMAIL_MAX_WORKERS": "email_max_workers",
}

DEFAULT_FROM_EMAIL = "info@theboardhop.com"


class Settings(BaseModel):
    """Immutable configuration for one run."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    backend_api_endpoint: str = Field(..., min_length=1)
    availability_api_host: str = Field(..., min_length=1)
    reservation_url: str = Field(..., min_length=1)
    postmark_api_endpoint: str = Field(..., min_length=1)
    postmark_api_token: str = Field(..., min_length=1)
    from_email: str = DEFAULT_FROM_EMAIL
    request_timeout: float = Field(30.0, gt=0)
    availability_max_workers: int = Field(4, ge=1)
    email_max_workers: int = Field(4, ge=1)

    @field_validator(
        "backend_api_endpoint", "availability_api_host", "reservation_url"
    )
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ (no .env loading then)

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: naming every missing or invalid variable
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    missing = [name for name in REQUIRED_VARS if not environ.get(name, "").strip()]
    if missing:
        raise ConfigurationError(
            [f"Missing required env var: {name}" for name in missing]
        )

    values = {field: environ[name] for name, field in REQUIRED_VARS.items()}
    for name, field in OPTIONAL_VARS.items():
        value = environ.get(name, "").strip()
        if value:
            values[field] = value

    try:
        return Settings(**values)
    except ValidationError as e:
        env_names = {field: name for name, field in {**REQUIRED_VARS, **OPTIONAL_VARS}.items()}
        problems = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            problems.append(f"{env_names.get(field, field)}: {error['msg']}")
        raise ConfigurationError(problems) from e
