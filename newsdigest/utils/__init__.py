"""Shared helpers: configuration, dates and printing."""
