"""Terminal key, mouse, colour and geometry helpers, and a desktop status line."""

__version__ = "0.9.3"