"""Codec settings for the conslist command-line tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from conslist.codec import CODEC_NAMES, ElementCodec, codec_for
from conslist.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecConfig:
    """How list documents are decoded and re-encoded.

    Attributes:
        element_type: Name of the element codec (see ``CODEC_NAMES``).
        indent: JSON indent for output, or None for the compact form.
        sort_keys: Sort object keys inside elements on output.
    """

    element_type: str = "json"
    indent: int | None = None
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.element_type not in CODEC_NAMES:
            msg = (
                f"element_type must be one of {', '.join(CODEC_NAMES)}, "
                f"got {self.element_type!r}"
            )
            raise ConfigError(msg)
        if self.indent is not None and (
            isinstance(self.indent, bool)
            or not isinstance(self.indent, int)
            or self.indent < 0
        ):
            msg = f"indent must be a non-negative integer, got {self.indent!r}"
            raise ConfigError(msg)
        if not isinstance(self.sort_keys, bool):
            msg = f"sort_keys must be a boolean, got {self.sort_keys!r}"
            raise ConfigError(msg)

    def codec(self) -> ElementCodec[Any]:
        return codec_for(self.element_type)

    def override(self, **changes: Any) -> CodecConfig:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_config(config_path: Path | str) -> CodecConfig:
    """Load codec settings from a YAML file.

    An empty file yields the defaults.

    Args:
        config_path: Path to the YAML file.

    Returns:
        CodecConfig with the file's settings.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds
            unknown keys or invalid values.
    """
    path = Path(config_path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f"cannot read {path}: {e}"
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f"invalid YAML in {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping at top level"
        raise ConfigError(msg)

    known = {f.name for f in fields(CodecConfig)}
    unknown = sorted(map(str, set(data) - known))
    if unknown:
        msg = f"{path}: unknown keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    logger.debug("Loaded codec config from %s", path)
    return CodecConfig(**data)
