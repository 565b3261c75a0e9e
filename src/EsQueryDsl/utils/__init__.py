"""Utility helpers shared across EsQueryDsl."""
