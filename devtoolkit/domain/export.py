"""
Icon export: ICO re-encoding, Base64 payloads and atomic file writes.

``export_icon`` encodes fully in memory before touching the filesystem,
then writes through a temporary file in the destination directory and
renames it into place.  A failed export leaves no partial file behind.
"""

from __future__ import annotations

import base64
import io
import logging
import os
import stat
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .entities import MAX_ICO_SIZE
from .enums import ExportFormat
from .errors import IconEncodeError, IconExportError

logger = logging.getLogger(__name__)


def parse_format(value: Union[str, ExportFormat]) -> ExportFormat:
    try:
        return ExportFormat(str(getattr(value, "value", value)).lower())
    except ValueError:
        raise IconEncodeError(f"Unsupported export format: {value!r}") from None


def encode_ico(png_bytes: bytes, target_size: int, *, max_size: int = MAX_ICO_SIZE) -> bytes:
    """Resample *png_bytes* to ``target_size`` x ``target_size`` RGBA and wrap it in a one-entry ICO."""
    if not 1 <= target_size <= max_size:
        raise IconEncodeError(
            f"ICO size must be between 1 and {max_size} pixels, got {target_size}"
        )

    try:
        with Image.open(io.BytesIO(png_bytes)) as source:
            frame = source.convert("RGBA").resize(
                (target_size, target_size), Image.Resampling.LANCZOS
            )
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise IconEncodeError(f"Could not decode image data: {exc}") from exc

    buf = io.BytesIO()
    try:
        frame.save(buf, format="ICO", sizes=[(target_size, target_size)])
    except (OSError, ValueError) as exc:
        raise IconEncodeError(f"Could not write ICO container: {exc}") from exc
    return buf.getvalue()


def _target_mode(path: Path) -> int:
    """Mode of the file being replaced, else the default for new files under the umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def encode_for_format(
    png_bytes: bytes, fmt: Union[str, ExportFormat], size: int
) -> bytes:
    """Bytes as they would be written to disk for *fmt*; PNG passes through untouched."""
    if not png_bytes:
        raise IconEncodeError("No icon to export. Generate an icon first.")
    if parse_format(fmt) is ExportFormat.ICO:
        return encode_ico(png_bytes, size)
    return png_bytes


def export_icon(
    png_bytes: bytes,
    fmt: Union[str, ExportFormat],
    size: int,
    destination: Union[str, os.PathLike],
) -> Path:
    payload = encode_for_format(png_bytes, fmt, size)
    path = Path(destination)

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as exc:
        logger.warning("Icon export to %s failed: %s", path, exc)
        raise IconExportError(f"Failed to save icon: {exc}") from exc

    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        logger.warning("Icon export to %s failed: %s", path, exc)
        raise IconExportError(f"Failed to save icon: {exc}") from exc

    logger.info("Saved %s icon to %s (%d bytes)", parse_format(fmt).value, path, len(payload))
    return path


def icon_to_base64(png_bytes: bytes) -> str:
    return base64.b64encode(png_bytes).decode("ascii")


def icon_to_data_url(png_bytes: bytes) -> str:
    return f"data:image/png;base64,{icon_to_base64(png_bytes)}"


def suggested_filename(
    text: str, fmt: Union[str, ExportFormat], now: Optional[datetime] = None
) -> str:
    """``defaultName.<ext>`` for blank text, else a timestamped name."""
    ext = parse_format(fmt).value
    if not text:
        return f"defaultName.{ext}"
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"img_generated_{stamp}.{ext}"
