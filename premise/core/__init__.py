"""Shared constants, logging and errors."""
