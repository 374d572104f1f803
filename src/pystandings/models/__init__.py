"""Data models shared by every layer."""

from .participant import ParticipantRecord, is_missing

__all__ = ["ParticipantRecord", "is_missing"]
