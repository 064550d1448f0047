"""Core domain logic and services for continuous shape measures."""
