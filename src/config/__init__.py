"""Configuration constants, schemas and settings."""
