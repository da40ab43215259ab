"""Environment-driven configuration."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Mapping

from embedport.errors import InvalidArgumentError

DEFAULT_MODE = "mock"
DEFAULT_MODEL = "mock-embedding"
DEFAULT_DIMENSIONS = 1536
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class EmbedportSettings:
    mode: str = DEFAULT_MODE
    model: str = DEFAULT_MODEL
    dimensions: int = DEFAULT_DIMENSIONS
    max_batch_size: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EmbedportSettings":
        env = os.environ if environ is None else environ
        return cls(
            mode=(env.get("EMBEDPORT_MODE") or DEFAULT_MODE).strip().lower(),
            model=env.get("EMBEDPORT_MODEL") or DEFAULT_MODEL,
            dimensions=_read_int(env, "EMBEDPORT_DIMENSIONS", DEFAULT_DIMENSIONS),
            max_batch_size=_read_int(env, "EMBEDPORT_MAX_BATCH_SIZE", None),
            log_level=(env.get("EMBEDPORT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    def provider_kwargs(self) -> dict[str, Any]:
        return {"model": self.model, "dims": self.dimensions}

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "model": self.model,
            "dimensions": self.dimensions,
            "max_batch_size": self.max_batch_size,
            "log_level": self.log_level,
        }


def _read_int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}.") from exc
    if value < 1:
        raise InvalidArgumentError(f"{name} must be positive, got {value}.")
    return value
