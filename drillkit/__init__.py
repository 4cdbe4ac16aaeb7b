"""Exercise runner: verifies, runs and watches small compile-and-test drills."""

__version__ = "0.1.0"