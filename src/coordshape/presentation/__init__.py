"""Presentation layer: command-line tools."""
