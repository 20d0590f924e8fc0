"""Mock implementations for testing."""

from tests.mocks.tiles import RecordingTile, make_recording_tiles

__all__ = ["RecordingTile", "make_recording_tiles"]
