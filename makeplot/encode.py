from __future__ import annotations

import io

import numpy as np
from PIL import Image

from makeplot.frame import FrameLayout


def frame_to_image(frame: np.ndarray, layout: FrameLayout) -> Image.Image:
    layout.check(frame)
    return Image.frombytes("RGB", (layout.width, layout.height), np.ascontiguousarray(frame).tobytes())


def encode_png(image: Image.Image) -> bytes:
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()
