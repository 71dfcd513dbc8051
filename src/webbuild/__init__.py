"""webbuild — web compiler configuration for JavaScript and WebAssembly output.

Holds the option sets for the JS and Wasm compiler backends and derives the
command-line arguments, build keys, and analytics values a build
orchestrator needs from them.
"""

__version__ = "0.1.0"
