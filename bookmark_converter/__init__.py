"""
Bookmark Converter: Chromium-family bookmark files to HTML.
"""

__version__ = "1.0.0"
