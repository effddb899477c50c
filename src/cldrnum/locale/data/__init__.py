"""Bundled CLDR number data (``locales.json``)."""
