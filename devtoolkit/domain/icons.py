"""
Icon Generator  (validation -> paint -> rasterize -> encode)
===========================================================

``generate_icon`` is the single entry point adapters call.  It validates
the raw request in a fixed order (first failure wins):

1. text is non-empty after trimming          -> ``EmptyText``
2. size is an integer within the bounds      -> ``InvalidSize``
3. background colour parses                  -> ``InvalidBackgroundColor``
4. text colour parses                        -> ``InvalidTextColor``
5. the two colours differ                    -> ``IndistinctColors``

then renders a square PNG.  Anything unexpected raised while rendering is
logged and re-raised as ``GenerationFailed`` so callers only ever see
``IconError`` subclasses.
"""

from __future__ import annotations

import logging

from .colors import parse_color
from .entities import (
    MAX_ICON_SIZE,
    MIN_ICON_SIZE,
    IconJob,
    IconSpec,
    ValidatedIconSpec,
)
from .enums import GenerationStage, IconShape
from .errors import (
    EmptyText,
    GenerationFailed,
    IconError,
    IconValidationError,
    IndistinctColors,
    InvalidBackgroundColor,
    InvalidColorFormat,
    InvalidShape,
    InvalidSize,
    InvalidTextColor,
)
from .layout import layout_text
from .raster import RasterImage, paint_shape, rasterize_glyphs

logger = logging.getLogger(__name__)


# ── Validation ────────────────────────────────────────────────────────


def parse_size(value, min_size: int = MIN_ICON_SIZE, max_size: int = MAX_ICON_SIZE) -> int:
    if isinstance(value, bool):
        raise InvalidSize(value, min_size, max_size)
    if isinstance(value, int):
        size = value
    else:
        try:
            size = int(str(value).strip())
        except ValueError:
            raise InvalidSize(value, min_size, max_size) from None
    if not min_size <= size <= max_size:
        raise InvalidSize(value, min_size, max_size)
    return size


def validate_icon_spec(
    spec: IconSpec,
    *,
    min_size: int = MIN_ICON_SIZE,
    max_size: int = MAX_ICON_SIZE,
) -> ValidatedIconSpec:
    if not spec.text.strip():
        raise EmptyText()

    size = parse_size(spec.size, min_size, max_size)

    try:
        background = parse_color(spec.background_color)
    except InvalidColorFormat as exc:
        raise InvalidBackgroundColor(exc) from exc

    try:
        foreground = parse_color(spec.text_color)
    except InvalidColorFormat as exc:
        raise InvalidTextColor(exc) from exc

    if background == foreground:
        raise IndistinctColors()

    try:
        shape = IconShape(spec.shape)
    except ValueError:
        raise InvalidShape(spec.shape) from None

    return ValidatedIconSpec(
        text=spec.text,
        shape=shape,
        size=size,
        background=background,
        foreground=foreground,
    )


# ── Rendering ─────────────────────────────────────────────────────────


def _render(validated: ValidatedIconSpec, job: IconJob) -> bytes:
    job.transition_to(GenerationStage.PAINTING)
    canvas = RasterImage(validated.size)
    paint_shape(canvas, validated.shape, validated.background)

    job.transition_to(GenerationStage.RASTERIZING)
    layout = layout_text(validated.text, validated.size, validated.shape)
    rasterize_glyphs(
        canvas,
        layout.text,
        layout.start_x,
        layout.start_y,
        layout.pixel_size,
        validated.foreground,
    )

    job.transition_to(GenerationStage.ENCODING)
    return canvas.encode_png()


def _run(job: IconJob, min_size: int, max_size: int) -> bytes:
    job.transition_to(GenerationStage.VALIDATING)
    try:
        validated = validate_icon_spec(job.spec, min_size=min_size, max_size=max_size)
    except IconValidationError as exc:
        logger.debug("Icon request rejected: %s", exc)
        job.reject(exc)
        raise

    try:
        png = _render(validated, job)
    except Exception as exc:
        logger.exception(
            "Icon generation failed (size=%d, shape=%s)",
            validated.size,
            validated.shape.value,
        )
        failure = GenerationFailed()
        job.fail(failure)
        raise failure from exc

    if not png:
        failure = GenerationFailed("Failed to generate icon: Empty image data")
        job.fail(failure)
        raise failure

    job.complete(png)
    logger.info(
        "Generated %dx%d %s icon (%d bytes)",
        validated.size,
        validated.size,
        validated.shape.value,
        len(png),
    )
    return png


def generate_icon(
    spec: IconSpec,
    *,
    min_size: int = MIN_ICON_SIZE,
    max_size: int = MAX_ICON_SIZE,
) -> bytes:
    """Return PNG bytes for *spec* or raise an ``IconError`` subclass."""
    return _run(IconJob(spec=spec), min_size, max_size)


def run_icon_job(
    spec: IconSpec,
    *,
    min_size: int = MIN_ICON_SIZE,
    max_size: int = MAX_ICON_SIZE,
) -> IconJob:
    """Like ``generate_icon`` but never raises; inspect ``job.stage`` / ``job.message``."""
    job = IconJob(spec=spec)
    try:
        _run(job, min_size, max_size)
    except IconError:
        # the failure is recorded on job.error
        pass
    return job
