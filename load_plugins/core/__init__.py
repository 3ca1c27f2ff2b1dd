"""Shared infrastructure — logging configuration."""
