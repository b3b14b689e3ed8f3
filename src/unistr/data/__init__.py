"""Packaged lookup tables and defaults."""
