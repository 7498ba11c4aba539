"""todoapp: a small MVP todo application (add/edit presenter, SQLite store, console front end)."""

__version__ = "0.1.0"
