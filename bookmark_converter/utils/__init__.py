"""Utility modules for the Bookmark Converter."""
