"""Command line interface for :mod:`bowling`."""
