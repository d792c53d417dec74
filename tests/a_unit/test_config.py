"""Unit tests for conslist.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from conslist.codec import JSON_VALUE, ScalarCodec
from conslist.config import CodecConfig, load_config
from conslist.errors import ConfigError


class TestCodecConfig:
    """Tests for the CodecConfig dataclass."""

    def test_defaults(self) -> None:
        config = CodecConfig()
        assert config.element_type == "json"
        assert config.indent is None
        assert config.codec() is JSON_VALUE

    def test_codec_lookup(self) -> None:
        assert CodecConfig(element_type="int").codec() == ScalarCodec(int)

    def test_invalid_element_type(self) -> None:
        with pytest.raises(ConfigError):
            CodecConfig(element_type="complex")

    def test_invalid_indent(self) -> None:
        with pytest.raises(ConfigError):
            CodecConfig(indent=-1)
        with pytest.raises(ConfigError):
            CodecConfig(indent=True)

    def test_override_skips_none(self) -> None:
        config = CodecConfig(element_type="str", indent=2)
        changed = config.override(element_type=None, indent=4)
        assert changed.element_type == "str"
        assert changed.indent == 4


class TestLoadConfig:
    """Tests for load_config."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("element_type: int\nindent: 2\nsort_keys: true\n")
        config = load_config(path)
        assert config == CodecConfig(element_type="int", indent=2, sort_keys=True)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("")
        assert load_config(path) == CodecConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("element_type: [int\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("- int\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_unknown_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("element_type: int\ncolour: blue\n")
        with pytest.raises(ConfigError, match="colour"):
            load_config(path)

    def test_unknown_keys_of_mixed_types(self, tmp_path: Path) -> None:
        path = tmp_path / "conslist.yaml"
        path.write_text("1: a\nfoo: b\n")
        with pytest.raises(ConfigError, match="1, foo"):
            load_config(path)
