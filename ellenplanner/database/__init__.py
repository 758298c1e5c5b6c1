"""Persistence layer for ellenplanner (reference Task/Leave/Project stores)."""
