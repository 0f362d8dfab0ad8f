"""Employee roll kept in a linked list, loaded from and saved to CSV or binary files."""

__version__ = "0.1.0"

__all__ = ["console", "controller", "employee", "linkedlist", "main", "storage"]