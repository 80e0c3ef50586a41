"""Shared service helpers."""

from app.services.common.deadline import Deadline

__all__ = ["Deadline"]
