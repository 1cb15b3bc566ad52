"""Utility helpers for evtflags."""
