"""Cache keys for reusing web build artifacts.

A configuration's ``build_key`` is a readable JSON token; a cache store
needs something filename-safe that also covers the inputs the build key
leaves out.  :func:`artifact_cache_key` hashes all of them.

Cache key
~~~~~~~~~
SHA-256 of ``(schema_version, compile_target, build_key, renderer,
toolchain_id)``.  Each part is NUL-separated so adjacent values cannot run
together.

Storage is left to the caller: this module only derives keys.
"""

from __future__ import annotations

import hashlib

from webbuild.compiler_config import CompilerConfig

# Bump when key semantics change to avoid stale hits across upgrades.
CACHE_SCHEMA_VERSION = 1


def artifact_cache_key(config: CompilerConfig, toolchain_id: str = "") -> str:
    """Compute a SHA-256 cache key for a build artifact.

    - **config** — the JS or Wasm configuration; its target, build key and
      renderer are all hashed
    - **toolchain_id** — identifies the compiler binary (e.g. an SDK
      version or absolute path); empty when the caller does not track it

    Returns a 64-char hex digest string.
    """
    h = hashlib.sha256()
    h.update(f"v{CACHE_SCHEMA_VERSION}\0".encode())
    h.update(f"target={config.compile_target.value}\0".encode())
    h.update(f"key={config.build_key}\0".encode())
    h.update(f"renderer={config.renderer.cli_name}\0".encode())
    h.update(f"toolchain={toolchain_id}\0".encode())
    return h.hexdigest()
