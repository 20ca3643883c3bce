"""Data models exposed by the backend."""
from .employee import Employee

__all__ = ["Employee"]
