"""Shared helpers for Calidr."""
