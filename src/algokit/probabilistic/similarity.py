"""
Vector similarity helpers for embedding search.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between two vectors.

    Returns:
        0.0 when lengths differ or either vector has zero norm.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape or va.size == 0:
        return 0.0
    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return 0.0
    return float(np.dot(va, vb)) / norm


def top_k_similar(
    query: Sequence[float],
    vectors: Sequence[Sequence[float]],
    k: int = 10,
    threshold: float = 0.0,
) -> list[tuple[int, float]]:
    """
    Indices of the `k` vectors most similar to `query`.

    Only scores >= `threshold` are returned; ties keep the lower index first.

    Returns:
        ``(index, score)`` pairs sorted by descending score.
    """
    if k <= 0:
        return []
    scored = [(i, cosine_similarity(query, v)) for i, v in enumerate(vectors)]
    scored = [(i, s) for i, s in scored if s >= threshold]
    scored.sort(key=lambda pair: (-pair[1], pair[0]))
    logger.debug(f"top_k_similar: {len(scored)} of {len(vectors)} vectors pass threshold {threshold}.")
    return scored[:k]
