import sys

from mpi4py import MPI

from BINSEARCHpy.do_locate import LocateRunner
from BINSEARCHpy.io.get_input_params import load_locate_data_from_yaml
from BINSEARCHpy.io.log_module import log_startup
from BINSEARCHpy.io.summary import print_summary
from BINSEARCHpy.io.write_header import write_header
from BINSEARCHpy.utils.timing import global_timing, timed_function

comm = MPI.COMM_WORLD


def parse_args(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        if comm.rank == 0:
            print("Usage: binsearch-locate <yaml_file>")
        sys.exit(1)
    return argv[1]


@timed_function("binsearch")
def run_locate(yaml_file: str):
    log_startup("binsearch-locate")
    write_header("Locate Initialization")

    data = load_locate_data_from_yaml(yaml_file)
    runner = LocateRunner(data, comm=comm)
    runner.load_inputs()
    print_summary(data)

    runner.run()
    if data.search.write_output:
        runner.write_output()
    return runner


def main(argv=None):
    yaml_file = parse_args(argv)
    run_locate(yaml_file)
    global_timing.report()


if __name__ == "__main__":
    main()
