"""Scrapers for the individual Ilias page types."""