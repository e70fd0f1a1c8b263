"""Shared pydantic models."""

from .wire import WireModel

__all__ = ["WireModel"]
