"""Player CRUD Web API with a read-through, write-invalidate cache."""

__version__ = "0.1.0"
