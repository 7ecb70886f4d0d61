"""Shared CLI infrastructure: context, options, error handling, wiring."""
