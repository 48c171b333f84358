"""Reusable test fixtures for GodotEnv."""
