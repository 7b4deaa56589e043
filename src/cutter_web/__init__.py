"""Thin interfaces over the cutter engine: a Flask JSON API and a CLI."""
