"""Most used colours in an image, via k-means clustering.

Samples every `precision`-th pixel in both axes and clusters the samples
with KMeans (n_init=3, random_state=42), one cluster per requested colour,
never more clusters than distinct sampled colours. Clusters are returned
most populated first as (r, g, b) tuples.

Falls back to histogram quantization (32 levels per channel, each bin
reported as the mean of its pixels) if sklearn is not available.

The core Colour type never decodes images; it only consumes the triples
produced here (Colour.from_palette / Colour.from_rgb).

Example:
    from_file('logo.png', limit=3, hex=True)   # ['#1a2b3c', '#ffffff', ...]
"""

from __future__ import annotations

import io
import os
from pathlib import Path

import numpy as np
from PIL import Image

from colour_type.core.colour import Colour

ImageSource = str | os.PathLike | bytes | Image.Image


def load_image(source: ImageSource) -> Image.Image:
    """Open a path, raw encoded bytes or an Image as RGB."""
    if isinstance(source, Image.Image):
        return source.convert('RGB')
    if isinstance(source, (bytes, bytearray)):
        return Image.open(io.BytesIO(source)).convert('RGB')
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f'image not found: {path}')
    with Image.open(path) as img:
        return img.convert('RGB')


def _sample(image: Image.Image, precision: int) -> np.ndarray:
    step = max(int(precision), 1)
    arr = np.asarray(image, dtype=np.int64)
    return arr[::step, ::step].reshape(-1, 3)


def _cluster(pixels: np.ndarray, n_clusters: int) -> tuple[np.ndarray, np.ndarray]:
    """Return (centres, counts). KMeans, or histogram bins without sklearn."""
    try:
        from sklearn.cluster import KMeans

        km = KMeans(n_clusters=n_clusters, n_init=3, random_state=42)
        km.fit(pixels.astype(np.float64))
        centres = np.rint(km.cluster_centers_).astype(np.int64)
        counts = np.bincount(km.labels_, minlength=len(centres))
    except ImportError:
        quantized = pixels // 32
        keys, inverse, counts = np.unique(quantized, axis=0, return_inverse=True, return_counts=True)
        inverse = inverse.reshape(-1)
        sums = np.zeros((len(keys), 3), dtype=np.int64)
        np.add.at(sums, inverse, pixels)
        centres = np.rint(sums / counts[:, None]).astype(np.int64)
    return centres, counts


def extract_palette(source: ImageSource, limit: int = 5, precision: int = 5) -> list[tuple[int, int, int]]:
    """Return up to `limit` dominant colours as (r, g, b), most used first."""
    if limit <= 0:
        return []

    pixels = _sample(load_image(source), precision)
    if len(pixels) == 0:
        return []

    distinct = len(np.unique(pixels, axis=0))
    centres, counts = _cluster(pixels, min(limit, distinct))

    # Stable sort keeps cluster order for equal counts
    order = np.argsort(-counts, kind='stable')[:limit]
    return [tuple(int(np.clip(c, 0, 255)) for c in centres[i]) for i in order]


def from_file(
    source: ImageSource,
    limit: int = 5,
    precision: int = 5,
    hex: bool = False,
) -> list[tuple[int, int, int]] | list[str]:
    """Most used colours in an image: RGB triples, or '#rrggbb' with hex=True."""
    triples = extract_palette(source, limit=limit, precision=precision)
    if hex:
        return Colour.from_palette(triples, hex=True)
    return triples
