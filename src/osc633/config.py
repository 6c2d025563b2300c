"""Configuration for osc633."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "DEFAULT_CHUNK_SIZE",
    "Osc633Config",
    "load_config",
]

CONFIG_DIR = Path.home() / ".osc633"
CONFIG_FILE = CONFIG_DIR / "config.json"
DEFAULT_CHUNK_SIZE = 4096
BOOLEAN_TRUE_STRINGS = {"1", "true", "yes", "on"}
BOOLEAN_FALSE_STRINGS = {"0", "false", "no", "off"}


class Osc633Config(BaseModel):
    """Runtime configuration for the osc633 command."""

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Maximum number of bytes read from the input per chunk.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the input stream (and of the output in encode mode).",
    )
    errors: str = Field(
        default="replace",
        description="Codec error handler used when input bytes cannot be decoded.",
    )
    skip_output: bool = Field(
        default=False,
        description=(
            "When True, plain output events are not printed; only sequence events are. "
            "Can be enabled via OSC633_SKIP_OUTPUT=1."
        ),
    )


def _parse_bool(raw: str) -> bool | None:
    normalized = raw.strip().lower()
    if normalized in BOOLEAN_TRUE_STRINGS:
        return True
    if normalized in BOOLEAN_FALSE_STRINGS:
        return False
    return None


def load_config(path: Path | None = None) -> Osc633Config:
    """Load config from file, with env var overrides.

    Reads *path* (``~/.osc633/config.json`` by default) and applies the
    ``OSC633_CHUNK_SIZE``, ``OSC633_ENCODING`` and ``OSC633_SKIP_OUTPUT``
    environment overrides. Falls back to defaults when the file is absent,
    is not valid JSON, or holds invalid values.

    Args:
        path: Optional config file to read instead of the default location.

    Returns:
        The resolved ``Osc633Config`` instance.
    """
    config_path = path if path is not None else CONFIG_FILE
    raw_config: dict[str, Any] = {}

    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as exc:
            log.warning(
                "invalid config JSON in %s (%s); falling back to defaults",
                config_path,
                exc,
            )
        except (OSError, UnicodeDecodeError) as exc:
            log.warning(
                "cannot read config file %s (%s); falling back to defaults",
                config_path,
                exc,
            )
        else:
            if isinstance(loaded, dict):
                raw_config = loaded
            log.debug("loaded config from %s", config_path)

    try:
        config = Osc633Config.model_validate(raw_config)
    except ValidationError as exc:
        log.warning(
            "invalid config values in %s (%s); falling back to defaults",
            config_path,
            exc.errors(include_url=False),
        )
        config = Osc633Config()

    # Env var overrides
    if chunk_size_raw := os.environ.get("OSC633_CHUNK_SIZE"):
        try:
            chunk_size = int(chunk_size_raw)
        except ValueError:
            chunk_size = 0
        if chunk_size > 0:
            config.chunk_size = chunk_size
        else:
            log.warning("ignoring OSC633_CHUNK_SIZE=%r; expected a positive integer", chunk_size_raw)
    if encoding := os.environ.get("OSC633_ENCODING"):
        config.encoding = encoding
    if skip_output_raw := os.environ.get("OSC633_SKIP_OUTPUT"):
        skip_output = _parse_bool(skip_output_raw)
        if skip_output is not None:
            config.skip_output = skip_output

    return config
