"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from jsxlite.cli import build_parser, load_config, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"format": "json"}

    def test_auto_discover_jsxlite_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "jsxlite.toml"
        cfg.write_text("[output]\nindent = 4\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"indent": 4}


class TestConfigMerge:
    def _options(self, tmp_path: Path, *extra: str):
        doc = tmp_path / "view.jsx"
        doc.write_text("<a/>")
        ns = build_parser().parse_args([str(doc), *extra])
        return resolve_options(ns)

    def test_defaults(self, tmp_path: Path) -> None:
        opts = self._options(tmp_path)
        assert opts.format == "tree"
        assert opts.indent == 2
        assert opts.output_file is None
        assert opts.debug is False

    def test_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text('[output]\nformat = "source"\n')
        assert self._options(tmp_path).format == "source"

    def test_cli_overrides_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text('[output]\nformat = "source"\n')
        assert self._options(tmp_path, "--format", "json").format == "json"

    def test_config_indent(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text("[output]\nindent = 0\n")
        assert self._options(tmp_path).indent == 0

    def test_cli_overrides_config_indent(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text("[output]\nindent = 8\n")
        assert self._options(tmp_path, "--indent", "1").indent == 1

    def test_non_integer_indent_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text('[output]\nindent = "wide"\n')
        assert self._options(tmp_path).indent == 2

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        assert self._options(tmp_path, "--config", str(cfg)).format == "json"

    def test_invalid_format_in_config(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text('[output]\nformat = "xml"\n')
        with pytest.raises(argparse.ArgumentTypeError, match="invalid output format"):
            self._options(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "jsxlite.toml").write_text("[output\n")
        with pytest.raises(argparse.ArgumentTypeError, match="invalid config file"):
            self._options(tmp_path)
