# renderer/scheduler.py
import logging
import math
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Callable, List, NamedTuple, Optional

import numpy as np

from camera.camera import Camera
from config import RenderSettings
from core.utils import optional_seed, pixel_rng
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.integrator import ray_color

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class PixelResult(NamedTuple):
    """Gamma-corrected color of one pixel and its index in the image buffer."""
    index: int
    color: Vector3


def render_pixel(index: int, scene: Hittable, camera: Camera,
                 settings: RenderSettings) -> PixelResult:
    """
    Averages samples_per_pixel jittered estimates for one pixel and applies
    gamma-2 correction.

    Pixels are indexed row-major from the top-left corner, so row 0 is the
    top of the image (v close to 1).
    """
    width, height = settings.width, settings.height
    row, col = divmod(index, width)
    j = height - 1 - row
    rng = pixel_rng(optional_seed(settings.seed), index)

    color = Vector3(0.0, 0.0, 0.0)
    for _ in range(settings.samples_per_pixel):
        u = (col + rng.random()) / (width - 1)
        v = (j + rng.random()) / (height - 1)
        ray = camera.get_ray(u, v, rng)
        color += ray_color(ray, scene, settings.max_depth, rng)
    color /= settings.samples_per_pixel

    return PixelResult(index, Vector3(math.sqrt(color.x), math.sqrt(color.y), math.sqrt(color.z)))


# Per-process state for the process pool, installed once by the initializer
# so the scene is not pickled with every task.
_worker_state = None


def _install_worker_state(scene: Hittable, camera: Camera, settings: RenderSettings):
    global _worker_state
    _worker_state = (scene, camera, settings)


def _render_pixel_in_worker(index: int) -> PixelResult:
    scene, camera, settings = _worker_state
    return render_pixel(index, scene, camera, settings)


def _make_executor(scene: Hittable, camera: Camera, settings: RenderSettings) -> Executor:
    if settings.executor == "process":
        return ProcessPoolExecutor(max_workers=settings.workers,
                                   initializer=_install_worker_state,
                                   initargs=(scene, camera, settings))
    return ThreadPoolExecutor(max_workers=settings.workers, thread_name_prefix="pixel")


def _run_inline(index: int, scene: Hittable, camera: Camera, settings: RenderSettings) -> Future:
    future = Future()
    future.set_result(render_pixel(index, scene, camera, settings))
    return future


def _launch_all(executor: Executor, scene: Hittable, camera: Camera,
                settings: RenderSettings) -> List[Future]:
    """
    Submits one task per pixel. Once the executor refuses to start a worker
    every remaining pixel is computed on the calling thread instead.

    A thread pool raises RuntimeError when it cannot start a thread; a
    process pool that cannot fork raises OSError. ThreadPoolExecutor queues
    the task before starting the thread, so a live worker may still render
    the refused pixel. Its future is lost to us, and the inline copy is the
    one kept; both are identical since each pixel seeds its own generator.
    """
    futures = []
    inline = False
    for index in range(settings.pixel_count):
        if not inline:
            try:
                if settings.executor == "process":
                    futures.append(executor.submit(_render_pixel_in_worker, index))
                else:
                    futures.append(executor.submit(render_pixel, index, scene, camera, settings))
                continue
            except (RuntimeError, OSError) as e:
                logger.warning("Could not launch worker (%s); rendering remaining pixels inline", e)
                inline = True
        futures.append(_run_inline(index, scene, camera, settings))
    return futures


def render(scene: Hittable, camera: Camera, settings: RenderSettings,
           progress: Optional[ProgressCallback] = None) -> np.ndarray:
    """
    Renders every pixel as an independent task and assembles the image.

    Returns a float array of shape (width * height, 3) holding
    gamma-corrected RGB in [0, 1] for well-formed scenes, indexed by
    row * width + col. Blocks until every pixel has finished; an exception
    raised by any pixel task propagates and no image is returned.
    """
    settings = settings.with_seed(optional_seed(settings.seed))
    total = settings.pixel_count
    logger.info("Rendering %dx%d, %d spp, depth %d, seed %d (%s executor)",
                settings.width, settings.height, settings.samples_per_pixel,
                settings.max_depth, settings.seed, settings.executor)

    results: List[PixelResult] = []
    with _make_executor(scene, camera, settings) as executor:
        futures = _launch_all(executor, scene, camera, settings)
        for future in as_completed(futures):
            results.append(future.result())
            if progress is not None:
                progress(len(results), total)

    image = np.zeros((total, 3), dtype=np.float64)
    for result in results:
        image[result.index] = (result.color.x, result.color.y, result.color.z)
    return image
