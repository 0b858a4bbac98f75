"""
Similarity utilities: cosine similarity for dense and sparse term vectors.
"""

from typing import Dict, List

import numpy as np


def cosine_similarity(v1: List[float], v2: List[float]) -> float:
    """Compute cosine similarity between two vectors."""
    if not v1 or not v2:
        return 0.0
    v1 = np.array(v1, dtype=float)
    v2 = np.array(v2, dtype=float)
    dot_product = np.dot(v1, v2)
    norm_product = np.linalg.norm(v1) * np.linalg.norm(v2)
    return float(dot_product / norm_product) if norm_product > 0 else 0.0


def sparse_cosine_similarity(w1: Dict[str, float], w2: Dict[str, float]) -> float:
    """Cosine similarity of two term → weight maps, aligned over the union of terms."""
    if not w1 or not w2:
        return 0.0
    terms = sorted(set(w1) | set(w2))
    return cosine_similarity(
        [w1.get(t, 0.0) for t in terms],
        [w2.get(t, 0.0) for t in terms],
    )
