"""Core data model, configuration and utilities."""
