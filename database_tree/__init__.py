"""Tree of databases, schemas and tables with collapsing, filtering and a movable selection."""

__version__ = "0.1.0"

__all__ = ["models", "item", "tree_items", "selection", "tree"]