"""Persistence functions over SQLModel sessions."""
