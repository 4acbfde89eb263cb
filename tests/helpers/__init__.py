"""Test helper modules for the searchpaths test suite.

- recording_fs: filesystem doubles that record resolver existence checks
"""
from __future__ import annotations

from .recording_fs import RecordingFileSystem

__all__ = ["RecordingFileSystem"]
