"""Minimal static file server for the Rapid Mixer web demo."""

__version__ = "1.0.0"
