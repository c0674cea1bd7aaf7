"""Asynchronous scraper for public LinkedIn company pages, job listings and people profiles."""

__version__ = "0.1.0"