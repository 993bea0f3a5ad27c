"""Vector similarity for sentence embeddings."""

import math


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """Cosine similarity in [-1, 1].

    A zero-norm vector has no direction; its similarity to anything is 1.0
    so it never marks a topic boundary.

    Raises:
        ValueError: If vectors have different dimensions.
    """
    if len(a) != len(b):
        raise ValueError(f"Vector dimension mismatch: {len(a)} != {len(b)}")
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 1.0
    dot = sum(x * y for x, y in zip(a, b))
    return dot / (norm_a * norm_b)
