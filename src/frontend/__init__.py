"""Flask web UI and JSON API on top of sentence_finder."""
from .web import app, create_finder

__all__ = ["app", "create_finder"]
