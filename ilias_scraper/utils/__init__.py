"""Helpers for turning scraped titles into file names."""