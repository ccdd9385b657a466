"""Host boundary: protocols, coordinator thread and selection snapshots."""

from .coordinator import CoordinatorThread, HostThreadError
from .models import (
    Snapshot,
    SnapshotError,
    SnapshotIOError,
    SnapshotNotFoundError,
    SnapshotValidationError,
    SnapshotYamlError,
)
from .protocol import (
    HostProject,
    HostProjectItem,
    HostSelectedItem,
    HostSelection,
    HostSolution,
    PropertyAccessError,
    PropertyEntry,
    PropertySource,
)
from .snapshot import load_snapshot
from .static import (
    StaticProject,
    StaticProjectItem,
    StaticProperty,
    StaticSelectedItem,
    StaticSelection,
    StaticSolution,
    static_properties,
)

__all__ = [
    "CoordinatorThread",
    "HostProject",
    "HostProjectItem",
    "HostSelectedItem",
    "HostSelection",
    "HostSolution",
    "HostThreadError",
    "PropertyAccessError",
    "PropertyEntry",
    "PropertySource",
    "Snapshot",
    "SnapshotError",
    "SnapshotIOError",
    "SnapshotNotFoundError",
    "SnapshotValidationError",
    "SnapshotYamlError",
    "StaticProject",
    "StaticProjectItem",
    "StaticProperty",
    "StaticSelectedItem",
    "StaticSelection",
    "StaticSolution",
    "load_snapshot",
    "static_properties",
]
