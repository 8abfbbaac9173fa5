"""Role Store - Role persistence and GraphQL surface for the personnel service."""

__version__ = "0.1.0"
