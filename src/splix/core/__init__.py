"""Core data models for splix."""
