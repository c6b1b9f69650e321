"""Operational CLI (python -m cli.main)."""
