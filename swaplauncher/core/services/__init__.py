"""Launcher services — detection, gates, installation and test runs."""
