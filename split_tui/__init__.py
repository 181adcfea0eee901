"""Pane layout tree, screen geometry, key encoding and resume-hint scraping."""

__version__ = "0.1.0"
__all__ = ["__version__"]