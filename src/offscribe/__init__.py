"""Offline speech-to-text with searchable, timestamped transcripts."""

__version__ = "0.1.0"
