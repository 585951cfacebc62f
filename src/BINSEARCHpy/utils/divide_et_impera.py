def divide_work(nitems: int, rank: int, size: int) -> tuple[int, int]:
    """
    Split ``range(nitems)`` into `size` contiguous chunks and return the
    half-open bounds ``(i_start, i_end)`` owned by `rank`.

    The first ``nitems % size`` ranks take one extra item, so chunk sizes
    differ by at most one and the chunks cover the range in rank order.
    """
    if size <= 0:
        raise ValueError(f"number of ranks must be positive, got {size}")
    if not 0 <= rank < size:
        raise ValueError(f"rank {rank} outside [0, {size})")

    chunk, remainder = divmod(nitems, size)
    i_start = rank * chunk + min(rank, remainder)
    i_end = i_start + chunk + (1 if rank < remainder else 0)
    return i_start, i_end
