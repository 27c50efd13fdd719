"""Ginger engine services."""
