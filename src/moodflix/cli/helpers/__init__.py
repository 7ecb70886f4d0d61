"""Rendering helpers for CLI commands."""
