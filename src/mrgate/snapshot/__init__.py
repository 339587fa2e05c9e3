"""Offline snapshot diff source."""

from mrgate.snapshot.source_snapshot import ModelSnapshot, SnapshotDiffSource

__all__ = ["ModelSnapshot", "SnapshotDiffSource"]
