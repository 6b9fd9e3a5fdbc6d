import io
import logging
import os
import tempfile

import cv2
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "my-kolam.png"
FORMATS = ("png", "jpeg")
JPEG_QUALITY = 90
# NamedTemporaryFile creates 0600; exported images must be readable by the static server
EXPORT_MODE = 0o644


class ExportError(RuntimeError):
    pass


def _encode_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf.getvalue()


def _encode_jpeg(img: Image.Image, quality: int = JPEG_QUALITY) -> bytes:
    # JPEG has no alpha channel; flatten before handing to OpenCV (BGR order)
    rgb = np.asarray(img.convert("RGB"))
    bgr = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
    ok, buf = cv2.imencode(".jpg", bgr, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    if not ok:
        raise ExportError("OpenCV JPEG encoding failed")
    return buf.tobytes()


def encode_image(raster, fmt: str = "png") -> bytes:
    """Serialize a rendered raster to image bytes."""
    if not isinstance(raster, Image.Image):
        raise ExportError("Nothing to export: canvas has not been rendered")
    fmt = fmt.lower()
    if fmt == "jpg":
        fmt = "jpeg"
    if fmt == "png":
        return _encode_png(raster)
    if fmt == "jpeg":
        return _encode_jpeg(raster)
    raise ExportError(f"Unsupported image format: {fmt}")


def export_image(raster, path: str = DEFAULT_FILENAME, fmt: str = None):
    """Write the raster to ``path``; returns (path, None) or (None, err).

    The file appears atomically: bytes go to a temp file in the target
    directory which is then renamed over ``path``.
    """
    if fmt is None:
        ext = os.path.splitext(path)[1].lstrip(".").lower()
        fmt = ext or "png"

    try:
        data = encode_image(raster, fmt)
    except ExportError as e:
        logger.warning("[PatternExporter] %s", e)
        return (None, e)
    except (OSError, ValueError, cv2.error) as e:
        logger.warning("[PatternExporter] Encoding failed: %s", e)
        return (None, ExportError(str(e)))

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        with tempfile.NamedTemporaryFile("wb", dir=directory, suffix=".part", delete=False) as f:
            tmp_path = f.name
            f.write(data)
        os.chmod(tmp_path, EXPORT_MODE)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        logger.warning("[PatternExporter] Could not write %s: %s", path, e)
        return (None, ExportError(str(e)))

    logger.info("[PatternExporter] Saved %s (%d bytes)", path, len(data))
    return (path, None)


__all__ = ["DEFAULT_FILENAME", "ExportError", "FORMATS", "encode_image", "export_image"]
