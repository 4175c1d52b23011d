"""Stateless helpers."""
