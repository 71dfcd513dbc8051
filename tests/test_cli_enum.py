"""Tests for webbuild.cli_enum and webbuild.renderer."""

import pytest

from webbuild.cli_enum import CliEnum
from webbuild.compiler_config import WasmOptLevel
from webbuild.renderer import WebRendererMode


class TestFromCliName:
    def test_known_token(self) -> None:
        assert WebRendererMode.from_cli_name("skwasm") is WebRendererMode.skwasm

    def test_unknown_token_lists_choices(self) -> None:
        with pytest.raises(ValueError, match="auto, canvaskit, html, skwasm"):
            WebRendererMode.from_cli_name("skia")

    def test_case_sensitive(self) -> None:
        with pytest.raises(ValueError):
            WasmOptLevel.from_cli_name("FULL")


class TestAllowedHelp:
    def test_declaration_order(self) -> None:
        assert list(WasmOptLevel.allowed_help()) == ["full", "debug", "none"]

    @pytest.mark.parametrize("enum_cls", [WasmOptLevel, WebRendererMode])
    def test_every_member_documented(self, enum_cls: type[CliEnum]) -> None:
        for name, help_text in enum_cls.allowed_help().items():
            assert help_text, name

    def test_base_help_text_empty(self) -> None:
        class Bare(CliEnum):
            only = "only"

        assert Bare.only.help_text == ""
        assert Bare.allowed_help() == {"only": ""}


class TestWebRendererMode:
    def test_cli_name_is_value(self) -> None:
        assert WebRendererMode.canvaskit.cli_name == "canvaskit"
        assert str(WebRendererMode.html) == "html"

    def test_auto_has_no_defines(self) -> None:
        assert WebRendererMode.auto.dart_defines == ()

    def test_canvaskit_defines(self) -> None:
        assert WebRendererMode.canvaskit.dart_defines == (
            "FLUTTER_WEB_AUTO_DETECT=false",
            "FLUTTER_WEB_USE_SKIA=true",
        )

    def test_skwasm_defines(self) -> None:
        assert "FLUTTER_WEB_USE_SKWASM=true" in WebRendererMode.skwasm.dart_defines
        assert "FLUTTER_WEB_USE_SKIA=false" in WebRendererMode.skwasm.dart_defines
