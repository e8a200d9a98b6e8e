"""
Sequence Statistics -- descriptive summary of an integer sequence.

Intended for the in-order output of a binary search tree (the full ascending
dataset), but accepts any sequence of integers in any order. The median sorts
its input first, so unsorted traversals (pre-order, post-order) give the same
summary as the in-order one.
"""

import numpy as np
from typing import Dict, List, Optional, Sequence, Union

Number = Union[int, float]

NO_DATA_MESSAGE = "No data available for statistical analysis."


def sequence_statistics(values: Sequence[int]) -> Optional[Dict[str, Number]]:
    """
    Compute count, sum, mean, median, min, max and range of a sequence.

    Args:
        values: Integers to summarize

    Returns:
        Dictionary with:
            count: Number of elements
            sum: Sum of all elements
            mean: Arithmetic mean
            median: Middle element of the sorted data, or the average of the
                two middle elements for even lengths
            min: Smallest element
            max: Largest element
            range: max - min
        or None when the sequence is empty.
    """
    # object dtype keeps arbitrary-precision Python ints; int64 would wrap.
    ordered = np.sort(np.asarray([int(v) for v in values], dtype=object))
    n = ordered.size
    if n == 0:
        return None

    mid = n // 2
    if n % 2 == 0:
        median = (ordered[mid - 1] + ordered[mid]) / 2
    else:
        median = float(ordered[mid])

    total = int(ordered.sum())
    smallest = int(ordered[0])
    largest = int(ordered[-1])
    return {
        "count": int(n),
        "sum": total,
        "mean": total / n,
        "median": float(median),
        "min": smallest,
        "max": largest,
        "range": largest - smallest,
    }


def format_statistics(stats: Optional[Dict[str, Number]]) -> List[str]:
    if stats is None:
        return [NO_DATA_MESSAGE]
    return [
        f"Dataset Size: {stats['count']} elements",
        f"Sum Total: {stats['sum']}",
        f"Mean Value: {stats['mean']:.2f}",
        f"Median Value: {stats['median']:.2f}",
        f"Minimum Value: {stats['min']}",
        f"Maximum Value: {stats['max']}",
        f"Value Range: {stats['range']}",
    ]
