"""Adapters – concrete remote collections."""
