"""Bookstore API: authors, books and token login over HTTP."""

__version__ = "0.1.0"
