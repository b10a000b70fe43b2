"""Shared helpers for ultralist."""
