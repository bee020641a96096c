"""Persistence adapters and factory."""
