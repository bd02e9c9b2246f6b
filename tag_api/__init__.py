"""
Tag API

A small REST service for creating, fetching and deleting tags with
localized response messages.
"""

__version__ = "1.0.0"
