"""Settings loaded from the environment (and a .env file via the CLI)."""

import os
from collections.abc import Mapping
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from react_named_imports.models.schemas import TransformOptions

ENV_PREFIX = "REACT_NAMED_IMPORTS_"

DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
DEFAULT_EXCLUDE_PATTERNS = ("node_modules", "dist", "build", ".git", "__pycache__", ".next")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class CodemodSettings(BaseModel):
    """Runtime configuration for the codemod and the batch runner."""

    model_config = ConfigDict(frozen=False)

    namespace: str = "React"
    module: str = "react"
    quote: Optional[Literal["single", "double"]] = None
    semicolons: Optional[bool] = None
    workers: int = Field(default=1, ge=1)
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))

    @field_validator("extensions")
    @classmethod
    def _dotted(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value if ext]

    def transform_options(self) -> TransformOptions:
        return TransformOptions(
            namespace=self.namespace,
            module=self.module,
            quote=self.quote,
            semicolons=self.semicolons,
        )


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings(env: Mapping[str, str] | None = None) -> CodemodSettings:
    """Build settings from ``REACT_NAMED_IMPORTS_*`` variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Raises:
        ValueError / pydantic.ValidationError: On malformed values
    """
    env = os.environ if env is None else env
    values: dict[str, object] = {}

    for key in ("namespace", "module", "quote"):
        raw = env.get(f"{ENV_PREFIX}{key.upper()}")
        if raw:
            values[key] = raw.strip()

    raw = env.get(f"{ENV_PREFIX}SEMICOLONS")
    if raw:
        values["semicolons"] = _parse_bool(raw, f"{ENV_PREFIX}SEMICOLONS")

    raw = env.get(f"{ENV_PREFIX}WORKERS")
    if raw:
        values["workers"] = int(raw)

    for key in ("extensions", "exclude_patterns"):
        raw = env.get(f"{ENV_PREFIX}{key.upper()}")
        if raw:
            values[key] = _split_list(raw)

    return CodemodSettings(**values)
