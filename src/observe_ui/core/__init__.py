"""Core types shared by page objects."""
