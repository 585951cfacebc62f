from mpi4py import MPI
from typing import List
import datetime

import numpy as np

from BINSEARCHpy import __version__

comm = MPI.COMM_WORLD
rank = comm.Get_rank()
size = comm.Get_size()


def log_startup(main_name):
    current_date = datetime.datetime.now().strftime("%Y-%m-%d")
    current_time = datetime.datetime.now().strftime("%H:%M:%S")

    if rank == 0:
        print("=" * 70)
        print("              =                                            =")
        print("              =        Sorted Sequence Locate Code         =")
        print("              =         (1-based bracket positions)        =")
        print("              =                                            =")
        print("=" * 70)
        print(f"Program <{main_name}>  v. {__version__}  starts ...")
        print(f"Date {current_date} at {current_time}")
        print(f"Number of MPI processes:    {size}")


def log_rank0(message: str):
    if rank == 0:
        print(message)


def log_section_start(name: str):
    log_rank0(f"Begins {name}")


def log_section_end(name: str):
    log_rank0(f"Ends {name}")


def log_sequence_data(xx, queries) -> List[str]:
    """Describe the searched sequence and the query set, one line per item."""
    lines = []
    lines.append("  Sequence data:")
    lines.append(f"    length   : {xx.shape[0]:>8}")
    lines.append(f"    first    : {xx[0]:>14.6f}")
    lines.append(f"    last     : {xx[-1]:>14.6f}")
    lines.append("")
    lines.append("  Query data:")
    lines.append(f"    nqueries : {queries.shape[0]:>8}")
    finite = queries[~np.isnan(queries)]
    if finite.shape[0] > 0:
        lines.append(f"    min      : {np.min(finite):>14.6f}")
        lines.append(f"    max      : {np.max(finite):>14.6f}")
    if finite.shape[0] < queries.shape[0]:
        lines.append(f"    nan      : {queries.shape[0] - finite.shape[0]:>8}")
    return lines
