# config.py
from dataclasses import dataclass, replace
from typing import Optional

ASPECT_RATIO = 16.0 / 9.0
DEFAULT_OUTPUT = "output_image.ppm"
EXECUTORS = ("thread", "process")

# Named render quality levels: image width, samples per pixel and bounce limit.
QUALITY_LEVELS = {
    "preview": {"width": 160, "samples": 8, "bounces": 8},
    "balanced": {"width": 320, "samples": 32, "bounces": 20},
    "final": {"width": 400, "samples": 100, "bounces": 50},
}
DEFAULT_QUALITY = "final"


def height_for(width: int, aspect_ratio: float = ASPECT_RATIO) -> int:
    return int(width / aspect_ratio)


@dataclass(frozen=True)
class RenderSettings:
    """
    Image size and sampling parameters shared read-only by every pixel task.

    seed selects the random streams; None means a fresh seed is drawn when
    rendering starts. workers=None lets the executor pick its pool size.
    """
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed: Optional[int] = None
    workers: Optional[int] = None
    executor: str = "thread"

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must not be negative, got {self.seed}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def with_seed(self, seed: int) -> "RenderSettings":
        return replace(self, seed=seed)

    @classmethod
    def from_quality(cls, name: str = DEFAULT_QUALITY, **overrides) -> "RenderSettings":
        """
        Builds settings from a named quality level. Keyword overrides that
        are None are ignored, so parsed command-line values can be passed
        straight through.
        """
        if name not in QUALITY_LEVELS:
            raise ValueError(f"unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}")
        quality = QUALITY_LEVELS[name]
        values = {
            "width": quality["width"],
            "samples_per_pixel": quality["samples"],
            "max_depth": quality["bounces"],
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        if "height" not in values:
            values["height"] = height_for(values["width"])
        return cls(**values)
