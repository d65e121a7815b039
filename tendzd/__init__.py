"""Tendzd multi-vendor order settlement for the Bahrain market."""

__version__ = "0.1.0"
