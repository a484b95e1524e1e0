"""Adapters – concrete transaction sources."""
