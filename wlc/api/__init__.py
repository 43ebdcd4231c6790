"""API module for WLC.

Functions defined here are the single source of truth for the CLI commands.
"""

__all__ = []
