"""Spin-and-yield synchronization primitives and a producer-consumer runner."""

__version__ = "0.1.0"