"""Heuristics and configuration helpers."""
