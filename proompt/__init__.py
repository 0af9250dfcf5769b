"""Manage prompt files across several locations and fill in their placeholders."""

__version__ = "0.1.0"
__all__ = ["__version__"]