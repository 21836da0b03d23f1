"""Scraping of remote Ilias course trees."""