"""Core traversal, configuration and error types for treeskel."""
