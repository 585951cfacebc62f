import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


def read_column_data(filepath: Path) -> np.ndarray:
    """
    Read whitespace separated numbers from a plain text file into a 1-D array.

    Multi-column files are flattened row by row. Lines starting with `#` are
    comments.
    """
    data = np.loadtxt(filepath, dtype=float, comments="#", ndmin=1)
    logger.debug("Read %d values from %s", data.size, filepath)
    return data.ravel()


def write_positions(
    queries: np.ndarray,
    positions: np.ndarray,
    label: str,
    output_dir: Path,
    precision: int = 6,
    verbose: bool = True,
) -> Path:
    """
    Write the located positions to a plain text file.

    Parameters
    ----------
    `queries` : (nq,) ndarray
        Query values.
    `positions` : (nq,) ndarray of int
        1-based positions returned by `locate_many`.
    `label` : str
        Label used to construct the filename, `<label>_positions.dat`.
    `output_dir` : Path
        Directory to write the output file, created if missing.
    `precision` : int
        Digits after the decimal point for the query column.
    `verbose` : bool
        If True, log the output file path.

    Returns
    -------
    `filepath` : Path
        Full path to the written file.
    """
    if queries.shape != positions.shape:
        raise ValueError(
            f"queries and positions differ in shape: {queries.shape} vs {positions.shape}"
        )

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"{label}_positions.dat"

    with filepath.open("w") as f:
        f.write("# query position\n")
        for query, position in zip(queries, positions):
            f.write(f"{query: .{precision}f} {int(position):d}\n")

    if verbose:
        logger.info(f"Written positions to {filepath}")

    return filepath
