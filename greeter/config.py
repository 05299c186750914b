from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"  # Listen on all interfaces inside the container


class ConfigError(ValueError):
    """Raised when the process environment holds an unusable setting."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        port = resolve_port(env.get("PORT"))
        host = env.get("HOST") or DEFAULT_HOST
        try:
            return cls(host=host, port=port)
        except ValidationError as exc:
            raise ConfigError(f"invalid PORT {port}: must be between 1 and 65535") from exc


def resolve_port(value: Optional[str]) -> int:
    """Turn the raw ``PORT`` value into a port number.

    Unset and empty values fall back to ``DEFAULT_PORT``.
    """
    if value is None or not value.strip():
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"invalid PORT {value!r}: not an integer") from exc
