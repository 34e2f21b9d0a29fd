"""Glance: local-first expense and budget tracker."""

__version__ = "0.1.0"
