# launcher/__init__.py
"""Modpack launcher backend: installed-package and display-resolution reconciliation."""

__version__ = "0.1.0"
