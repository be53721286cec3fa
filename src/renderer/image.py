# renderer/image.py
from typing import TextIO

import numpy as np
from PIL import Image


def to_8bit(image: np.ndarray) -> np.ndarray:
    """
    Quantize gamma-corrected colors in [0, 1] to 8-bit channels.
    Each channel maps to int(255.99 * c), clipped to [0, 255].
    """
    return np.floor(np.nan_to_num(image) * 255.99).clip(0, 255).astype("uint8")


def write_ppm(stream: TextIO, image: np.ndarray, width: int, height: int) -> None:
    """
    Write the flat image buffer as a plain-text P3 pixmap, one pixel per line
    in R G B order, rows top to bottom.
    """
    if image.shape != (width * height, 3):
        raise ValueError(f"image buffer has shape {image.shape}, expected ({width * height}, 3)")

    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in to_8bit(image).tolist():
        stream.write(f"{r} {g} {b}\n")


def save_png(path: str, image: np.ndarray, width: int, height: int) -> None:
    """
    Save the same pixels as write_ppm() to a PNG (or any Pillow-supported format).
    """
    pixels = to_8bit(image).reshape(height, width, 3)
    Image.fromarray(pixels).save(path)
