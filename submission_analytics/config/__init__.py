"""Configuration package for the submission analytics system."""
