"""Renderer modes for compiled web apps.

The compiler configuration carries a renderer but never interprets it; the
defines listed here are what the renderer implies for the app itself.
"""

from __future__ import annotations

from webbuild.cli_enum import CliEnum


class WebRendererMode(CliEnum):
    """UI rendering strategy of the compiled output."""

    auto = "auto"
    canvaskit = "canvaskit"
    html = "html"
    skwasm = "skwasm"

    @property
    def help_text(self) -> str:
        return _HELP[self]

    @property
    def dart_defines(self) -> tuple[str, ...]:
        """Environment defines passed to the compiled app for this renderer."""
        return _DEFINES[self]


_HELP: dict[WebRendererMode, str] = {
    WebRendererMode.auto: (
        "Use the HTML renderer on mobile devices, and CanvasKit on desktop devices."
    ),
    WebRendererMode.canvaskit: (
        "Always use the CanvasKit renderer. This renderer uses WebGL and WebAssembly "
        "to render graphics."
    ),
    WebRendererMode.html: (
        "Always use the HTML renderer. This renderer uses a combination of HTML, "
        "CSS, SVG, 2D Canvas, and WebGL."
    ),
    WebRendererMode.skwasm: "Always use the experimental skwasm renderer.",
}

_DEFINES: dict[WebRendererMode, tuple[str, ...]] = {
    WebRendererMode.auto: (),
    WebRendererMode.canvaskit: (
        "FLUTTER_WEB_AUTO_DETECT=false",
        "FLUTTER_WEB_USE_SKIA=true",
    ),
    WebRendererMode.html: (
        "FLUTTER_WEB_AUTO_DETECT=false",
        "FLUTTER_WEB_USE_SKIA=false",
    ),
    WebRendererMode.skwasm: (
        "FLUTTER_WEB_AUTO_DETECT=false",
        "FLUTTER_WEB_USE_SKIA=false",
        "FLUTTER_WEB_USE_SKWASM=true",
    ),
}
