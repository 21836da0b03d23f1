"""Scrape course material from Ilias and sync it to a local directory."""

__version__ = "2.3.0"