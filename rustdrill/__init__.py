"""Exercise runner for small Rust exercises, with worked drills."""

__version__ = "0.1.0"