"""Command line client for the Twist team-messaging API."""

__version__ = "0.1.0"
