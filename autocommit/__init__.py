"""Commit, tag and push working-tree changes from an automation run."""

__version__ = "0.1.0"
