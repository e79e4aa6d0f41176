"""
Metric Module - Sortedness score used to order and prune priority search.
"""

from .layout import Layout


def sortedness_metric(layout: Layout) -> int:
    """
    Count adjacent same-color layer pairs across all containers.

    Higher values mean the layout is closer to solved; a full
    monochrome container of capacity C contributes C - 1.

    Args:
        layout: Layout to score

    Returns:
        Number of adjacent equal pairs
    """
    metric = 0
    for layers in layout.to_matrix():
        for lower, upper in zip(layers, layers[1:]):
            if lower == upper:
                metric += 1
    return metric
