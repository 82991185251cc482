"""Rust-style utility types: optionals, wrapping arithmetic, reference counting, string refs and environment helpers."""

__version__ = "0.1.0"