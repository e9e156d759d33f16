from realcolors.differ.snapshot_cache import SnapshotCache
from realcolors.differ.snapshot_diff import diff_snapshots, snapshots_differ

__all__ = ["SnapshotCache", "diff_snapshots", "snapshots_differ"]
