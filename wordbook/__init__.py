"""Wordbook: in-memory word and definition lookup."""
