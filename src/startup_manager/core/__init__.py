"""Core startup entry operations."""
