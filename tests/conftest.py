"""Shared pytest configuration."""

pytest_plugins = ["eventdripper.testing.fixtures"]
