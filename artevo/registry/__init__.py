from artevo.registry.artifact_registry import ArtifactRegistry
from artevo.registry.rwlock import ReadWriteLock

__all__ = ["ArtifactRegistry", "ReadWriteLock"]
