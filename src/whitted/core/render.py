"""Parallel render loop.

Every pixel is independent: the world and camera are read-only during a
render and each pixel's color depends only on its own ray. Rows are the unit
of work. With more than one worker, a ``multiprocessing.Pool`` is started
whose initializer installs the world and camera into each worker process
once; finished rows stream back through ``imap_unordered`` and the parent
writes each into the canvas exactly once.

Progress is reported per completed row, in the parent process only, through
an optional tqdm bar and an optional callback.

Example:
    >>> from whitted.core.render import RenderSettings, render
    >>> from whitted.scene.demo import shadow_scene
    >>> world, camera = shadow_scene(width=64, height=32)
    >>> canvas = render(world, camera, RenderSettings(workers=4, progress=True))
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import os
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
from tqdm import tqdm

from whitted.core.canvas import Canvas
from whitted.scene.world import DEFAULT_DEPTH

if TYPE_CHECKING:
    from whitted.camera.pinhole import Camera
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RenderSettings:
    """Options for a render.

    Attributes:
        depth: Recursion budget for reflection and refraction.
        workers: Number of worker processes. 1 renders in-process; None uses
            one worker per CPU.
        progress: Whether to show a tqdm progress bar.
    """

    depth: int = DEFAULT_DEPTH
    workers: int | None = None
    progress: bool = False

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Recursion depth must be non-negative, got {self.depth}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")

    def resolved_workers(self) -> int:
        """Return the effective worker count."""
        if self.workers is None:
            return os.cpu_count() or 1
        return self.workers


def render_row(world: World, camera: Camera, y: int, depth: int) -> npt.NDArray[np.float64]:
    """Compute one row of pixels.

    Returns:
        Array of shape (camera.width, 3) with the unclamped colors.
    """
    row = np.empty((camera.width, 3), dtype=np.float64)
    for x in range(camera.width):
        ray = camera.ray_for_pixel(x, y)
        color = world.color_at(ray, depth)
        row[x] = (color.r, color.g, color.b)
    return row


# =============================================================================
# Worker Process State
# =============================================================================

# Installed once per worker by the pool initializer
_worker_state: dict[str, Any] = {}


def _init_worker(world: World, camera: Camera, depth: int) -> None:
    _worker_state["world"] = world
    _worker_state["camera"] = camera
    _worker_state["depth"] = depth


def _render_row_task(y: int) -> tuple[int, npt.NDArray[np.float64]]:
    row = render_row(_worker_state["world"], _worker_state["camera"], y, _worker_state["depth"])
    return y, row


# =============================================================================
# Render Entry Points
# =============================================================================


def render_rows(
    world: World,
    camera: Camera,
    settings: RenderSettings | None = None,
) -> Generator[tuple[int, npt.NDArray[np.float64]], None, None]:
    """Render row by row, yielding ``(y, row)`` as each row completes.

    With more than one worker, rows arrive in completion order, not in
    ``y`` order.

    Args:
        world: The scene to render.
        camera: The camera to render through.
        settings: Render options (defaults to ``RenderSettings()``).

    Yields:
        Tuples of the row index and its (width, 3) color array.
    """
    if settings is None:
        settings = RenderSettings()
    workers = min(settings.resolved_workers(), camera.height)

    if workers == 1:
        for y in range(camera.height):
            yield y, render_row(world, camera, y, settings.depth)
        return

    with mp.Pool(
        processes=workers,
        initializer=_init_worker,
        initargs=(world, camera, settings.depth),
    ) as pool:
        yield from pool.imap_unordered(_render_row_task, range(camera.height))


def render(
    world: World,
    camera: Camera,
    settings: RenderSettings | None = None,
    *,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render ``world`` through ``camera`` into a new canvas.

    Args:
        world: The scene to render.
        camera: The camera to render through.
        settings: Render options (defaults to ``RenderSettings()``).
        callback: Optional function called after each completed row with
            ``(rows_completed, total_rows)``.

    Returns:
        The canvas holding one unclamped color per pixel.
    """
    if settings is None:
        settings = RenderSettings()

    canvas = Canvas(camera.width, camera.height)
    total = camera.height
    logger.info(
        "Rendering %dx%d with %d worker(s), depth %d",
        camera.width,
        camera.height,
        min(settings.resolved_workers(), total),
        settings.depth,
    )
    start = time.perf_counter()

    with tqdm(total=total, unit="row", desc="Rendering", disable=not settings.progress) as bar:
        for completed, (y, row) in enumerate(render_rows(world, camera, settings), start=1):
            canvas.write_row(y, row)
            bar.update(1)
            logger.debug("Row %d done (%d/%d)", y, completed, total)
            if callback is not None:
                callback(completed, total)

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return canvas
