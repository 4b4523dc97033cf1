"""Shared helpers for splix."""
