"""Fabricate a backdated commit history in a local git repository."""

__version__ = "0.1.0"
