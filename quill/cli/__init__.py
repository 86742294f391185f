"""Command line interface for Quill."""
