"""Configuration for minibank."""
