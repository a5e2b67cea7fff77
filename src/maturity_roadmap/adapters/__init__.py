"""Adapters: file-backed capability catalog and its packaged data."""
