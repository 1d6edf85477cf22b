"""Nano protocol primitives: headers, wire messages, proof of work, in-memory state and data paths."""

__version__ = "0.1.0"