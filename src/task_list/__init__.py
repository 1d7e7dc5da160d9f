"""In-memory task list with pending and completed sections."""

__version__ = "0.1.0"
