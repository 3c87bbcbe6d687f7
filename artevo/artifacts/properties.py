from pydantic import BaseModel, ConfigDict, Field

HUE_RANGE = 360
PATTERN_COUNT = 10
COMPLEXITY_RANGE = 100
SIZE_STEPS = 5


class VisualProperties(BaseModel):
    """Visual traits decoded from a genome."""

    color_hue: int = Field(..., ge=0, lt=HUE_RANGE)
    pattern: int = Field(..., ge=0, lt=PATTERN_COUNT)
    complexity: int = Field(..., ge=0, lt=COMPLEXITY_RANGE)
    size_multiplier: int = Field(..., ge=1, le=SIZE_STEPS)

    model_config = ConfigDict(frozen=True)


def derive_properties(genome: int) -> VisualProperties:
    """Decode the visual properties packed into *genome*.

    Each trait reads a different "digit" of the genome in a mixed radix
    (360, 10, 100, 5), so neighbouring traits stay independent.
    """
    if genome < 0:
        raise ValueError(f"Genome must be non-negative, got {genome}")
    return VisualProperties(
        color_hue=genome % HUE_RANGE,
        pattern=(genome // HUE_RANGE) % PATTERN_COUNT,
        complexity=(genome // (HUE_RANGE * PATTERN_COUNT)) % COMPLEXITY_RANGE,
        size_multiplier=(genome // (HUE_RANGE * PATTERN_COUNT * COMPLEXITY_RANGE))
        % SIZE_STEPS
        + 1,
    )
