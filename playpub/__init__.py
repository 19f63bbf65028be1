"""Publish Android App Bundles to Google Play after a build."""

__version__ = "0.1.0"
