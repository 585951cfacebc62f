import numpy as np

from BINSEARCHpy.errors import InvalidInputError, NotSortedError


def check_sequence(xx, check_sorted: bool = False) -> np.ndarray:
    """
    Convert `xx` to a 1-D float array and check that it can be searched.

    Parameters
    ----------
    `xx` : array_like
        Sequence to be searched, expected non-decreasing.
    `check_sorted` : bool
        If True, verify the non-decreasing order. A NaN anywhere in the
        sequence fails this check.

    Returns
    -------
    `xx` : ndarray of shape (n,)
        The sequence as float64.

    Raises
    ------
    InvalidInputError
        If the sequence is not one-dimensional or has fewer than 2 values.
    NotSortedError
        If `check_sorted` is set and the sequence decreases somewhere.
    """
    xx = np.asarray(xx, dtype=float)

    if xx.ndim != 1:
        raise InvalidInputError(f"sequence must be one-dimensional, got ndim={xx.ndim}")
    if xx.shape[0] < 2:
        raise InvalidInputError(
            f"sequence must contain at least 2 values, got {xx.shape[0]}"
        )

    if check_sorted and not np.all(xx[1:] >= xx[:-1]):
        first_bad = int(np.argmin(xx[1:] >= xx[:-1]))
        raise NotSortedError(
            f"sequence is not non-decreasing at position {first_bad + 2}: "
            f"{xx[first_bad]} followed by {xx[first_bad + 1]}"
        )

    return xx


def locate_index(xx, x: float, check_sorted: bool = False) -> int:
    """
    Locate the 1-based bracket position of `x` in the sorted sequence `xx`.

    The window ``(lo, hi)`` is halved until the two ends are adjacent. A probe
    that equals `x` returns immediately, so with repeated values the result is
    the first one hit along the search path, not the first or last occurrence.
    The final bracket resolves to ``lo + 1`` when ``x <= xx[lo]``, to
    ``hi + 1`` when ``x < xx[hi]`` and to ``hi + 2`` otherwise.

    :param xx: The sorted sequence, at least 2 values
    :param x: The value to locate
    :param check_sorted: Verify the sequence order before searching
    :return: a position in ``[1, len(xx) + 1]``

    Example Usage:

    xx = [1.0, 3.0, 5.0, 7.0, 9.0]
    locate_index(xx, 4.0) returns 3, the position 4.0 would take.
    locate_index(xx, 10.0) returns 6, one past the end.
    """
    xx = check_sequence(xx, check_sorted=check_sorted)

    lo = 0
    hi = xx.shape[0] - 1

    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if x == xx[mid]:
            return mid + 1
        if x < xx[mid]:
            hi = mid
        else:
            lo = mid

    if x <= xx[lo]:
        return lo + 1
    if x < xx[hi]:
        return hi + 1
    return hi + 2


def locate_many(xx, x, check_sorted: bool = False) -> np.ndarray:
    """
    Apply `locate_index` to every value in `x` at once.

    Parameters
    ----------
    `xx` : array_like
        Sorted sequence of at least 2 values.
    `x` : array_like
        Query values, any shape.
    `check_sorted` : bool
        Verify the sequence order before searching.

    Returns
    -------
    `positions` : ndarray of intp, same shape as `x`
        1-based positions, identical to calling `locate_index` per value.
    """
    xx = check_sequence(xx, check_sorted=check_sorted)
    queries = np.asarray(x, dtype=float)
    shape = queries.shape
    queries = queries.ravel()

    nq = queries.shape[0]
    lo = np.zeros(nq, dtype=np.intp)
    hi = np.full(nq, xx.shape[0] - 1, dtype=np.intp)
    positions = np.zeros(nq, dtype=np.intp)
    found = np.zeros(nq, dtype=bool)

    active = lo + 1 < hi
    while np.any(active):
        mid = (lo + hi) // 2
        probe = xx[mid]

        hit = active & (queries == probe)
        positions[hit] = mid[hit] + 1
        found |= hit

        active &= ~hit
        go_left = queries < probe
        hi = np.where(active & go_left, mid, hi)
        lo = np.where(active & ~go_left, mid, lo)
        active &= lo + 1 < hi

    bracket = np.where(
        queries <= xx[lo],
        lo + 1,
        np.where(queries < xx[hi], hi + 1, hi + 2),
    )
    positions[~found] = bracket[~found]

    return positions.reshape(shape)
