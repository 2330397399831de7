"""Natter: comment service for the blog."""

__version__ = "0.1.0"
