"""Compiler configurations for the JavaScript and WebAssembly web backends.

A build orchestrator constructs exactly one concrete configuration and asks
it for:

- ``compile_target`` — which backend it drives (``js`` or ``wasm``)
- ``to_command_options()`` — the ordered arguments for the compiler process
- ``build_key`` — a deterministic token identifying the configuration, used
  to decide whether a previous build artifact can be reused
- ``build_event_analytics_values()`` — key/value pairs for build telemetry

Build key
~~~~~~~~~
A compact JSON object (``{"csp":false,...}``) whose keys are written in the
order of the variant's ``BUILD_KEY_FIELDS``.  The order is fixed here rather
than left to the encoder so keys never drift between releases.

Every configuration is a frozen dataclass: no operation here mutates state,
performs I/O, or raises for any field value, including an out-of-range
``optimization_level``.  Call :meth:`JsCompilerConfig.validate` to reject
those explicitly.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from webbuild.cli_enum import CliEnum
from webbuild.renderer import WebRendererMode


class InvalidConfigurationError(ValueError):
    """A configuration value lies outside its accepted domain."""


class CompileTarget(StrEnum):
    """Which backend a configuration drives."""

    js = "js"
    wasm = "wasm"


class WasmOptLevel(CliEnum):
    """How much wasm-opt post-processing runs on the emitted module."""

    full = "full"
    debug = "debug"
    none = "none"

    @classmethod
    def default(cls) -> WasmOptLevel:
        return cls.full

    @property
    def help_text(self) -> str:
        if self is WasmOptLevel.none:
            return "wasm-opt is not run. Fastest build; bigger, slower output."
        if self is WasmOptLevel.debug:
            return (
                f"Similar to `{WasmOptLevel.full.cli_name}`, but member names are preserved. "
                "Debugging is easier, but size is a bit bigger."
            )
        return "wasm-opt is run. Build time is slower, but output is smaller and faster."


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def _encode_build_key(fields: tuple[tuple[str, Any], ...]) -> str:
    """Encode ``(name, value)`` pairs as a compact JSON object, in order."""
    return json.dumps(dict(fields), separators=(",", ":"))


@dataclass(frozen=True, kw_only=True)
class WebCompilerConfig(ABC):
    """Options shared by every web compiler configuration."""

    renderer: WebRendererMode = WebRendererMode.auto

    BUILD_KEY_FIELDS: ClassVar[tuple[str, ...]] = ()

    @property
    @abstractmethod
    def compile_target(self) -> CompileTarget:
        """Return which target this compiler outputs (js or wasm)."""

    @abstractmethod
    def _build_key_values(self) -> tuple[Any, ...]:
        """Values for ``BUILD_KEY_FIELDS``, in the same order."""

    @property
    def build_key(self) -> str:
        values = self._build_key_values()
        return _encode_build_key(tuple(zip(self.BUILD_KEY_FIELDS, values, strict=True)))

    def build_event_analytics_values(self) -> dict[str, object]:
        return {}


@dataclass(frozen=True, kw_only=True)
class JsCompilerConfig(WebCompilerConfig):
    """Configuration for the Dart-to-JavaScript compiler (dart2js)."""

    #: The default optimization level for dart2js.
    DEFAULT_OPTIMIZATION_LEVEL: ClassVar[str] = "O4"
    VALID_OPTIMIZATION_LEVELS: ClassVar[tuple[str, ...]] = ("O1", "O2", "O3", "O4")

    # Build environment names, one per option.
    K_DART2JS_OPTIMIZATION: ClassVar[str] = "Dart2jsOptimization"
    K_DART2JS_DUMP_INFO: ClassVar[str] = "Dart2jsDumpInfo"
    K_DART2JS_NO_FREQUENCY_BASED_MINIFICATION: ClassVar[str] = (
        "Dart2jsNoFrequencyBasedMinification"
    )
    K_CSP_MODE: ClassVar[str] = "cspMode"
    K_SOURCE_MAPS_ENABLED: ClassVar[str] = "SourceMaps"
    K_NATIVE_NULL_ASSERTIONS: ClassVar[str] = "NativeNullAssertions"

    BUILD_KEY_FIELDS: ClassVar[tuple[str, ...]] = (
        "csp",
        "dumpInfo",
        "nativeNullAssertions",
        "noFrequencyBasedMinification",
        "optimizationLevel",
        "sourceMaps",
    )

    # Disable dynamic code generation to satisfy CSP policies.
    csp: bool = False
    dump_info: bool = False
    native_null_assertions: bool = False
    no_frequency_based_minification: bool = False
    # O1 (lowest, profile default) to O4 (highest, release default). Not validated.
    optimization_level: str = DEFAULT_OPTIMIZATION_LEVEL
    source_maps: bool = True

    @classmethod
    def run(
        cls,
        *,
        native_null_assertions: bool,
        renderer: WebRendererMode,
    ) -> JsCompilerConfig:
        """Configuration for the ``run`` workflow; everything else defaulted."""
        return cls(
            native_null_assertions=native_null_assertions,
            optimization_level=cls.DEFAULT_OPTIMIZATION_LEVEL,
            renderer=renderer,
        )

    @property
    def compile_target(self) -> CompileTarget:
        return CompileTarget.js

    def to_shared_command_options(self) -> list[str]:
        """Arguments for both the full JS compile and the front-end-only pass."""
        options: list[str] = []
        if self.native_null_assertions:
            options.append("--native-null-assertions")
        if not self.source_maps:
            options.append("--no-source-maps")
        return options

    def to_command_options(self) -> list[str]:
        """Arguments for the full JS compile, shared options first."""
        options = self.to_shared_command_options()
        options.append(f"-{self.optimization_level}")
        if self.dump_info:
            options.append("--dump-info")
        if self.no_frequency_based_minification:
            options.append("--no-frequency-based-minification")
        if self.csp:
            options.append("--csp")
        return options

    def _build_key_values(self) -> tuple[Any, ...]:
        return (
            self.csp,
            self.dump_info,
            self.native_null_assertions,
            self.no_frequency_based_minification,
            self.optimization_level,
            self.source_maps,
        )

    def to_build_environment(self) -> dict[str, str]:
        """Options keyed by their build environment names."""
        return {
            self.K_DART2JS_OPTIMIZATION: self.optimization_level,
            self.K_DART2JS_DUMP_INFO: _bool_str(self.dump_info),
            self.K_DART2JS_NO_FREQUENCY_BASED_MINIFICATION: _bool_str(
                self.no_frequency_based_minification
            ),
            self.K_CSP_MODE: _bool_str(self.csp),
            self.K_SOURCE_MAPS_ENABLED: _bool_str(self.source_maps),
            self.K_NATIVE_NULL_ASSERTIONS: _bool_str(self.native_null_assertions),
        }

    def validate(self) -> JsCompilerConfig:
        """Return ``self``, or raise if ``optimization_level`` is not O1-O4."""
        if self.optimization_level not in self.VALID_OPTIMIZATION_LEVELS:
            allowed = ", ".join(self.VALID_OPTIMIZATION_LEVELS)
            raise InvalidConfigurationError(
                f"Invalid optimization level {self.optimization_level!r} "
                f"(expected one of: {allowed})"
            )
        return self


@dataclass(frozen=True, kw_only=True)
class WasmCompilerConfig(WebCompilerConfig):
    """Configuration for the Dart-to-Wasm compiler (dart2wasm)."""

    K_OMIT_TYPE_CHECKS: ClassVar[str] = "WasmOmitTypeChecks"
    K_RUN_WASM_OPT: ClassVar[str] = "RunWasmOpt"

    BUILD_KEY_FIELDS: ClassVar[tuple[str, ...]] = ("omitTypeChecks", "wasmOpt")

    omit_type_checks: bool = False
    wasm_opt: WasmOptLevel = WasmOptLevel.full

    @property
    def compile_target(self) -> CompileTarget:
        return CompileTarget.wasm

    def to_command_options(self) -> list[str]:
        # -O1: optimizes
        # -O2: -O1 plus minification (still semantics preserving)
        # -O3: -O2 plus omitting implicit type checks
        # -O4: -O3 plus omitting explicit type checks
        #
        # The name section is kept by default and only stripped in `full`.
        # `none` disables optimization entirely, whatever the tier.
        level = "-O4" if self.omit_type_checks else "-O2"
        if self.wasm_opt is WasmOptLevel.none:
            return ["-O0"]
        if self.wasm_opt is WasmOptLevel.debug:
            return [level, "--no-minify"]
        return [level, "--no-name-section"]

    def _build_key_values(self) -> tuple[Any, ...]:
        return (self.omit_type_checks, self.wasm_opt.cli_name)

    def build_event_analytics_values(self) -> dict[str, object]:
        return {
            **super().build_event_analytics_values(),
            self.K_OMIT_TYPE_CHECKS: _bool_str(self.omit_type_checks),
            self.K_RUN_WASM_OPT: self.wasm_opt.cli_name,
        }

    def to_build_environment(self) -> dict[str, str]:
        """Options keyed by their build environment names."""
        return {
            self.K_OMIT_TYPE_CHECKS: _bool_str(self.omit_type_checks),
            self.K_RUN_WASM_OPT: self.wasm_opt.cli_name,
        }


CompilerConfig = JsCompilerConfig | WasmCompilerConfig


def command_options(config: CompilerConfig) -> list[str]:
    """Return the full compiler argument list for either configuration."""
    if isinstance(config, JsCompilerConfig):
        return config.to_command_options()
    if isinstance(config, WasmCompilerConfig):
        return config.to_command_options()
    raise TypeError(f"Unsupported compiler configuration: {type(config).__name__}")
