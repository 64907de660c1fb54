"""Shared pytest configuration."""

pytest_plugins = ["dialwindow.testing.fixtures"]
