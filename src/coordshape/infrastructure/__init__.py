"""Infrastructure implementations of core interfaces."""
