import logging
from pathlib import Path
from typing import Optional

import numpy as np
from mpi4py import MPI

from BINSEARCHpy.errors import InvalidInputError, NotSortedError
from BINSEARCHpy.io.input_parameters import LocateData, RuntimeData
from BINSEARCHpy.io.log_module import log_rank0, log_sequence_data
from BINSEARCHpy.io.write_data import read_column_data, write_positions
from BINSEARCHpy.io.write_header import headered_function
from BINSEARCHpy.locate import check_sequence, locate_many
from BINSEARCHpy.utils.divide_et_impera import divide_work
from BINSEARCHpy.utils.timing import timed_function

logger = logging.getLogger(__name__)


class LocateRunner:
    def __init__(self, data: LocateData, comm=None):
        """
        Locate a set of query values in a sorted sequence, spreading the
        queries over the ranks of `comm`.

        Parameters
        ----------
        `data` : LocateData
            Validated input parameters.
        `comm` : MPI communicator, optional
            Defaults to MPI.COMM_WORLD.
        """
        self.data = data
        self.comm = comm if comm is not None else MPI.COMM_WORLD
        self.rank = self.comm.Get_rank()
        self.size = self.comm.Get_size()

        self.sequence: Optional[np.ndarray] = None
        self.queries: Optional[np.ndarray] = None
        self.positions: Optional[np.ndarray] = None

    def _read_inputs(self):
        file_names = self.data.file_names
        if self.data.sequence is not None:
            sequence = np.asarray(self.data.sequence, dtype=float)
        else:
            sequence = read_column_data(file_names.resolve(file_names.datafile))
        if self.data.queries is not None:
            queries = np.asarray(self.data.queries, dtype=float)
        else:
            queries = read_column_data(file_names.resolve(file_names.queryfile))
        return sequence, queries

    def load_inputs(self):
        """
        Read the sequence and the queries on rank 0 and broadcast them.

        The sequence is checked once here, so an invalid sequence fails on
        every rank before any search starts. A read error on rank 0 is
        broadcast and raised on every rank.
        """
        inputs, error = None, None
        if self.rank == 0:
            try:
                inputs = self._read_inputs()
            except (OSError, ValueError) as e:
                logger.error(f"Unable to read input data: {e}")
                error = e

        inputs, error = self.comm.bcast((inputs, error), root=0)
        if error is not None:
            raise error
        self.sequence, self.queries = inputs

        try:
            self.sequence = check_sequence(
                self.sequence, check_sorted=self.data.search.check_sorted
            )
        except (InvalidInputError, NotSortedError) as e:
            logger.error(f"Invalid sequence: {e}")
            raise

        q_start, q_end = divide_work(self.queries.shape[0], self.rank, self.size)
        self.data.set_runtime_data(
            RuntimeData(
                nproc=self.size,
                nseq=self.sequence.shape[0],
                nqueries=self.queries.shape[0],
                q_start=q_start,
                q_end=q_end,
            )
        )
        for line in log_sequence_data(self.sequence, self.queries):
            log_rank0(line)

    @timed_function("locate")
    @headered_function("Search Loop")
    def run(self) -> Optional[np.ndarray]:
        """
        Locate the local slice of queries and gather the positions on rank 0.

        Returns
        -------
        `positions` : ndarray of intp or None
            All positions in query order on rank 0, None on the other ranks.
        """
        if self.sequence is None:
            self.load_inputs()

        runtime = self.data.get_runtime_data()
        local = locate_many(self.sequence, self.queries[runtime.q_start : runtime.q_end])

        chunks = self.comm.gather(local, root=0)
        if self.rank == 0:
            self.positions = np.concatenate(chunks).astype(np.intp, copy=False)
            log_rank0(f"  Located {self.positions.shape[0]} queries")
        return self.positions

    @headered_function("Writing data")
    def write_output(self, output_dir: Optional[Path] = None) -> Optional[Path]:
        if self.rank != 0:
            return None
        if self.positions is None:
            raise RuntimeError("run() has to be called before write_output()")

        if output_dir is None:
            output_dir = self.data.file_names.resolve(self.data.file_names.output_dir)

        return write_positions(
            self.queries,
            self.positions,
            label=self.data.file_names.prefix,
            output_dir=Path(output_dir),
            precision=self.data.search.precision,
        )
