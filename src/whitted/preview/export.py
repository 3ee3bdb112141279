"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text "P3", written directly)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from whitted.preview.export import save_png, save_ppm
    >>> save_png(canvas, "scene.png")
    >>> save_ppm(canvas, "scene.ppm")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

from whitted.preview.encode import COLOR_MAXVAL, canvas_to_rgb8

if TYPE_CHECKING:
    from whitted.core.canvas import Canvas

logger = logging.getLogger(__name__)

# Plain PPM readers are only required to accept lines up to this length
PPM_MAX_LINE = 70


def _wrap_tokens(tokens: list[str], limit: int = PPM_MAX_LINE) -> list[str]:
    lines: list[str] = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= limit:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain PPM text.

    Each pixel row starts on a new line and is wrapped so that no line is
    longer than 70 characters. The text ends with a newline.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM document.
    """
    pixels = canvas_to_rgb8(canvas)

    lines = ["P3", f"{canvas.width} {canvas.height}", str(COLOR_MAXVAL)]
    for row in pixels:
        tokens = [str(int(v)) for v in row.reshape(-1)]
        lines.extend(_wrap_tokens(tokens))
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Write ``canvas`` to ``filepath`` as a plain PPM file.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.info("Saved %dx%d PPM to %s", canvas.width, canvas.height, path)
    return path


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Write ``canvas`` to ``filepath`` as an 8-bit RGB PNG.

    Returns:
        The path written.
    """
    path = Path(filepath)
    pil_image = PILImage.fromarray(canvas_to_rgb8(canvas))
    pil_image.save(path, format="PNG")
    logger.info("Saved %dx%d PNG to %s", canvas.width, canvas.height, path)
    return path
