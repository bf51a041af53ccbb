"""Memory map, pixel helpers, cart text conversion, Lua patching and a software renderer for a fantasy-console emulator."""

__version__ = "0.1.0"