"""Networking exercises: routing tables, a leaky bucket and small TCP/UDP services."""

__version__ = "0.1.0"