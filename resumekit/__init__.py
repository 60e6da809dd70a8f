"""Validate structured resume data and render it to PDF."""

__version__ = "0.1.0"
