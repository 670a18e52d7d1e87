"""Utility helpers for mdsite."""
