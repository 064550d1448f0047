"""Core domain models, interfaces and strategies."""
