"""Icon generator exception hierarchy.

Validation errors are expected outcomes and carry a message fit for
display.  Encode/export errors are recoverable I/O-style failures.
``GenerationFailed`` is the catch-all for faults inside the rasterizer.
"""


class IconError(Exception):
    """Root of every icon generator failure."""


# ── Validation ────────────────────────────────────────────────────────


class IconValidationError(IconError):
    is_warning = False


class EmptyText(IconValidationError):
    def __init__(self):
        super().__init__("Please enter text for the icon")


class InvalidSize(IconValidationError):
    def __init__(self, value, min_size: int, max_size: int):
        self.value = value
        super().__init__(
            f"Size must be a number between {min_size} and {max_size}"
        )


class InvalidColorFormat(IconValidationError):
    def __init__(self, value: str, reason: str = "Color must be in #RRGGBB format"):
        self.value = value
        self.reason = reason
        super().__init__(reason)


class InvalidColor(IconValidationError):
    label = "color"

    def __init__(self, cause: InvalidColorFormat):
        self.value = cause.value
        super().__init__(f"Invalid {self.label}: {cause.reason}")


class InvalidBackgroundColor(InvalidColor):
    label = "background color"


class InvalidTextColor(InvalidColor):
    label = "text color"


class InvalidShape(IconValidationError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported shape: {value!r} (expected circle or square)")


class IndistinctColors(IconValidationError):
    """Soft rejection: the request is well-formed but the icon would be unreadable."""

    is_warning = True

    def __init__(self):
        super().__init__(
            "Background and text colors should be different for better visibility"
        )


# ── Processing ────────────────────────────────────────────────────────


class IconEncodeError(IconError):
    """Image bytes could not be decoded or the container could not be written."""


class IconExportError(IconError):
    """Writing the exported file failed; no partial file is left behind."""


class GenerationFailed(IconError):
    def __init__(
        self,
        message: str = "Icon generation failed due to internal error. Try different settings.",
    ):
        super().__init__(message)


class InvalidStageTransition(IconError):
    """Raised when an icon job changes stage in an order the state machine forbids."""
