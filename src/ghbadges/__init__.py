"""Compose status badge snippets for software repositories."""

__version__ = "0.1.0"
