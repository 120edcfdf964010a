"""Launcher core — models, configuration, logging and services."""
