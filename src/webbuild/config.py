"""Project configuration loader for webbuild.

Reads ``webbuild.toml`` from the project root and builds the compiler
configuration for each backend, so that tools never hardcode compiler
options.

Layout::

    [web]
    target = "js"              # "js" or "wasm"
    renderer = "canvaskit"

    [web.js]
    optimization_level = "O4"
    source_maps = true

    [web.wasm]
    omit_type_checks = false
    wasm_opt = "full"

Keys left out take the compiler configuration defaults.

Usage::

    from webbuild.config import load_config
    cfg = load_config()
    args = cfg.compiler_config.to_command_options()
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from webbuild.compiler_config import (
    CompileTarget,
    CompilerConfig,
    InvalidConfigurationError,
    JsCompilerConfig,
    WasmCompilerConfig,
    WasmOptLevel,
)
from webbuild.renderer import WebRendererMode

CONFIG_FILENAME = "webbuild.toml"

# TOML key -> JsCompilerConfig field, with the expected value type.
_JS_KEYS: dict[str, type] = {
    "csp": bool,
    "dump_info": bool,
    "native_null_assertions": bool,
    "no_frequency_based_minification": bool,
    "optimization_level": str,
    "source_maps": bool,
}


@dataclass
class WebProjectConfig:
    """Parsed project configuration."""

    # Root directory (where webbuild.toml lives)
    root: Path

    target: CompileTarget = CompileTarget.js
    js: JsCompilerConfig = field(default_factory=JsCompilerConfig)
    wasm: WasmCompilerConfig = field(default_factory=WasmCompilerConfig)

    @property
    def compiler_config(self) -> CompilerConfig:
        """The configuration for the selected target."""
        if self.target is CompileTarget.wasm:
            return self.wasm
        return self.js


def _find_root(start: Optional[Path] = None) -> Path:
    """Walk up from *start* (or cwd) to find webbuild.toml."""
    if start is not None:
        return start
    candidate = Path.cwd().resolve()
    while candidate != candidate.parent:
        if (candidate / CONFIG_FILENAME).exists():
            return candidate
        candidate = candidate.parent
    raise FileNotFoundError(
        f"Could not find {CONFIG_FILENAME} in any parent of the current directory. "
        f"Run webbuild commands from within a project that contains {CONFIG_FILENAME}."
    )


def _parse_choice(enum_cls: Any, value: Any, key: str) -> Any:
    """Convert a TOML string to a CliEnum member, naming *key* on failure."""
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"{key} must be a string, got {value!r}")
    try:
        return enum_cls.from_cli_name(value)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{key}: {exc}") from exc


def _table(value: Any, key: str) -> dict[str, Any]:
    """Return *value* if it is a TOML table, naming *key* on failure."""
    if not isinstance(value, dict):
        raise InvalidConfigurationError(f"{key} must be a table, got {value!r}")
    return value


def _parse_js(
    section: dict[str, Any],
    renderer: WebRendererMode,
    validate: bool = True,
) -> JsCompilerConfig:
    kwargs: dict[str, Any] = {}
    for key, value in section.items():
        expected = _JS_KEYS.get(key)
        if expected is None:
            raise InvalidConfigurationError(f"Unknown key web.js.{key}")
        if not isinstance(value, expected):
            raise InvalidConfigurationError(
                f"web.js.{key} must be a {expected.__name__}, got {value!r}"
            )
        kwargs[key] = value
    config = JsCompilerConfig(renderer=renderer, **kwargs)
    return config.validate() if validate else config


def _parse_wasm(section: dict[str, Any], renderer: WebRendererMode) -> WasmCompilerConfig:
    unknown = set(section) - {"omit_type_checks", "wasm_opt"}
    if unknown:
        raise InvalidConfigurationError(f"Unknown key web.wasm.{sorted(unknown)[0]}")
    omit_type_checks = section.get("omit_type_checks", False)
    if not isinstance(omit_type_checks, bool):
        raise InvalidConfigurationError(
            f"web.wasm.omit_type_checks must be a bool, got {omit_type_checks!r}"
        )
    wasm_opt = WasmOptLevel.default()
    if "wasm_opt" in section:
        wasm_opt = _parse_choice(WasmOptLevel, section["wasm_opt"], "web.wasm.wasm_opt")
    return WasmCompilerConfig(
        omit_type_checks=omit_type_checks,
        wasm_opt=wasm_opt,
        renderer=renderer,
    )


def load_config(
    root: Optional[Path] = None,
    target: Optional[str] = None,
) -> WebProjectConfig:
    """Load webbuild.toml.

    Args:
        root: Project root directory.  Auto-detected if ``None``.
        target: ``"js"`` or ``"wasm"``; overrides ``web.target`` from the
                file.  Defaults to ``"js"`` when neither is given.

    Value types are checked for both sections; the ``optimization_level``
    tier is only checked when the js target is selected.
    """
    root = _find_root(root)
    toml_path = root / CONFIG_FILENAME
    if not toml_path.exists():
        raise FileNotFoundError(f"Config not found: {toml_path}")

    with open(toml_path, "rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigurationError(f"{toml_path}: {exc}") from exc

    web = _table(raw.get("web", {}), "web")
    target_name = target if target is not None else web.get("target", CompileTarget.js.value)
    if not isinstance(target_name, str) or target_name not in {t.value for t in CompileTarget}:
        raise InvalidConfigurationError(
            f"Unknown target {target_name!r} (expected one of: js, wasm)"
        )

    renderer = WebRendererMode.auto
    if "renderer" in web:
        renderer = _parse_choice(WebRendererMode, web["renderer"], "web.renderer")

    selected = CompileTarget(target_name)
    return WebProjectConfig(
        root=root,
        target=selected,
        js=_parse_js(
            _table(web.get("js", {}), "web.js"),
            renderer,
            validate=selected is CompileTarget.js,
        ),
        wasm=_parse_wasm(_table(web.get("wasm", {}), "web.wasm"), renderer),
    )
