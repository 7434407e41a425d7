"""
Offline parser for the Terminal API Postman collection.

Turns a saved collection document into an API catalog, a flat endpoint list,
a Markdown summary and two static migration mapping tables.
"""
from .artifacts import write_artifacts
from .parser import CollectionFormatError, ParsedCollection, load_collection, parse_collection
from .summary import render_summary

__all__ = [
    "CollectionFormatError",
    "ParsedCollection",
    "load_collection",
    "parse_collection",
    "render_summary",
    "write_artifacts",
]
