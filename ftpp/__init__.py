"""Reusable building blocks: buffers, pools, patterns, threading, messaging, timing and maths."""

__version__ = "0.1.0"