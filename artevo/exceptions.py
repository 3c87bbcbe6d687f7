class ArtEvoError(Exception):
    """Base for all ArtEvo exceptions."""

    pass


# High-level families
class RegistryError(ArtEvoError):
    """Artifact registry failures."""

    pass


class EvolutionError(ArtEvoError):
    """Evolution process failures."""

    pass


# Registry subtypes
class ArtifactNotFoundError(RegistryError, LookupError):
    """Raised when an artifact id does not exist in the registry."""

    def __init__(self, artifact_id: int):
        super().__init__(f"Artifact {artifact_id} not found")
        self.artifact_id = artifact_id


# Evolution subtypes
class CadenceNotReachedError(EvolutionError):
    """Evolution attempted before the cadence interval elapsed."""

    def __init__(self, current_tick: int, due_tick: int):
        super().__init__(
            f"Evolution not due until tick {due_tick} (current tick {current_tick})"
        )
        self.current_tick = current_tick
        self.due_tick = due_tick


class InsufficientPopulationError(EvolutionError):
    """Two distinct parents could not be selected."""

    pass


class GenesisAlreadySeededError(EvolutionError):
    """Genesis seeding may only happen once per registry."""

    pass
