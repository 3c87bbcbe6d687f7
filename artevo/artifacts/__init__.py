from artevo.artifacts.artifact import Artifact
from artevo.artifacts.constants import GENOME_MODULUS
from artevo.artifacts.properties import VisualProperties, derive_properties

__all__ = ["Artifact", "GENOME_MODULUS", "VisualProperties", "derive_properties"]
