"""
Domain entities with business logic.

Patterns used
-------------
- **Value Objects** ``IconSpec`` (raw, user-editable fields) and
  ``ValidatedIconSpec`` (parsed, range-checked fields).
- **State Pattern** on ``IconJob``: enforces the per-request lifecycle
  (IDLE -> VALIDATING -> REJECTED | PAINTING -> RASTERIZING -> ENCODING
  -> READY, with FAILED reachable from every processing stage).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .colors import RGB
from .enums import GenerationStage, IconShape, STAGE_TRANSITIONS
from .errors import IconError, InvalidStageTransition


# ── Value Objects ─────────────────────────────────────────────────────


# Defaults shared with ``devtoolkit.config.Settings``.
MIN_ICON_SIZE = 16
MAX_ICON_SIZE = 1024
MAX_ICO_SIZE = 256  # largest entry an ICO directory can describe
DEFAULT_ICON_SIZE = 128
DEFAULT_BACKGROUND_COLOR = "#3B82F6"
DEFAULT_TEXT_COLOR = "#FFFFFF"


@dataclass(frozen=True)
class IconSpec:
    text: str = ""
    shape: IconShape = IconShape.CIRCLE
    size: Union[int, str] = DEFAULT_ICON_SIZE
    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR


@dataclass(frozen=True)
class ValidatedIconSpec:
    text: str
    shape: IconShape
    size: int
    background: RGB
    foreground: RGB


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class IconJob:
    spec: IconSpec
    stage: GenerationStage = GenerationStage.IDLE
    png: Optional[bytes] = None
    error: Optional[IconError] = None

    def transition_to(self, new_stage: GenerationStage) -> None:
        """Move to *new_stage* if the transition is legal, else raise."""
        allowed = STAGE_TRANSITIONS.get(self.stage, set())
        if new_stage not in allowed:
            raise InvalidStageTransition(
                f"Cannot transition from {self.stage} to {new_stage}"
            )
        self.stage = new_stage

    def reject(self, error: IconError) -> None:
        self.transition_to(GenerationStage.REJECTED)
        self.error = error

    def fail(self, error: IconError) -> None:
        self.transition_to(GenerationStage.FAILED)
        self.error = error

    def complete(self, png: bytes) -> None:
        self.transition_to(GenerationStage.READY)
        self.png = png

    @property
    def succeeded(self) -> bool:
        return self.stage is GenerationStage.READY

    @property
    def message(self) -> str:
        """Status line suitable for showing next to the preview."""
        if self.succeeded:
            return "Icon generated successfully!"
        if self.error is not None:
            return str(self.error)
        return ""
