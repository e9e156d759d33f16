"""Structural comparison of two Snapshots."""

from __future__ import annotations

from realcolors.core.types import PropertyChange, Snapshot, SnapshotDelta, Variant


def snapshots_differ(old: Snapshot, new: Snapshot) -> bool:
    """
    True if the two snapshots differ in their variant set, or in the property
    names or values of any variant. Key order is ignored.
    """
    if set(old) != set(new):
        return True
    return any(dict(old[variant]) != dict(new[variant]) for variant in old)


def diff_snapshots(old: Snapshot, new: Snapshot) -> SnapshotDelta:
    """Describe what changed from ``old`` to ``new``, variant by variant."""
    delta = SnapshotDelta()
    # Iterate in Variant declaration order so deltas are reproducible
    for variant in Variant:
        in_old = variant in old
        in_new = variant in new
        if in_new and not in_old:
            delta.added_variants.append(variant)
            continue
        if in_old and not in_new:
            delta.removed_variants.append(variant)
            continue
        if not in_old:
            continue

        old_props, new_props = old[variant], new[variant]
        added = [name for name in new_props if name not in old_props]
        removed = [name for name in old_props if name not in new_props]
        if added:
            delta.added[variant] = added
        if removed:
            delta.removed[variant] = removed
        for name, value in new_props.items():
            if name in old_props and old_props[name] != value:
                delta.changed.append(PropertyChange(
                    variant=variant, name=name, old=old_props[name], new=value,
                ))
    return delta
