"""Bundled data files for devcleaner."""
