"""Shared helpers for the submission analytics system."""
