"""Chatterbox post service: CRUD for posts plus post-created events."""

__version__ = "0.1.0"
