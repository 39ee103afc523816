"""Shared helpers for logging, YAML parsing and random number generation."""
