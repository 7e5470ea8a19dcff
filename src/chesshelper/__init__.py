"""Resolve free-form and keyboard move input into a single legal chess move."""

__version__ = "0.1.0"
