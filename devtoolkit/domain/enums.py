"""Domain enumerations and state-transition rules."""

import enum


class IconShape(str, enum.Enum):
    CIRCLE = "circle"
    SQUARE = "square"


class ExportFormat(str, enum.Enum):
    PNG = "png"
    ICO = "ico"


class GenerationStage(str, enum.Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    REJECTED = "REJECTED"
    PAINTING = "PAINTING"
    RASTERIZING = "RASTERIZING"
    ENCODING = "ENCODING"
    READY = "READY"
    FAILED = "FAILED"


# State machine: maps current stage -> set of valid next stages
STAGE_TRANSITIONS: dict[GenerationStage, set[GenerationStage]] = {
    GenerationStage.IDLE: {GenerationStage.VALIDATING},
    GenerationStage.VALIDATING: {GenerationStage.REJECTED, GenerationStage.PAINTING},
    GenerationStage.PAINTING: {GenerationStage.RASTERIZING, GenerationStage.FAILED},
    GenerationStage.RASTERIZING: {GenerationStage.ENCODING, GenerationStage.FAILED},
    GenerationStage.ENCODING: {GenerationStage.READY, GenerationStage.FAILED},
    GenerationStage.REJECTED: set(),
    GenerationStage.READY: set(),
    GenerationStage.FAILED: set(),
}
