"""Utility helpers for rotations and timing."""
