"""Shared helpers for the recommendation proxy."""
