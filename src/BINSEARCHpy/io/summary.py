from BINSEARCHpy.io.input_parameters import LocateData
from BINSEARCHpy.io.log_module import log_rank0


def print_summary(data: LocateData) -> None:
    """
    Print the summary of the locate input parameters.

    Parameters
    ----------
    data : LocateData
        Validated input. Runtime data is printed when it has been set.
    """
    file_names = data.file_names
    search = data.search

    log_rank0("")
    log_rank0(
        "  ======================================================================"
    )
    log_rank0(
        "  =  INPUT Summary                                                     ="
    )
    log_rank0(
        "  ======================================================================"
    )
    log_rank0("")
    log_rank0("  <INPUT>")
    log_rank0(f"                input file :     {data.filename}")
    log_rank0(f"                    prefix :     {file_names.prefix}")
    log_rank0(f"                  work_dir :     {file_names.work_dir}")
    log_rank0(f"                output_dir :     {file_names.output_dir}")
    if data.sequence is not None:
        log_rank0(f"                  sequence :     inline ({len(data.sequence)} values)")
    else:
        log_rank0(f"                  datafile :     {file_names.datafile}")
    if data.queries is not None:
        log_rank0(f"                   queries :     inline ({len(data.queries)} values)")
    else:
        log_rank0(f"                 queryfile :     {file_names.queryfile}")
    log_rank0(f"              check sorted :     {search.check_sorted}")
    log_rank0(f"              write output :     {search.write_output}")
    log_rank0(f"                 precision :{search.precision:>10}")
    log_rank0("  </INPUT>")
    log_rank0("")

    runtime = data.get_runtime_data()
    if runtime is not None:
        log_rank0("  <RUNTIME>")
        log_rank0(f"           sequence length :{runtime.nseq:>10}")
        log_rank0(f"         number of queries :{runtime.nqueries:>10}")
        log_rank0(f"   number of MPI processes :{runtime.nproc:>10}")
        log_rank0("  </RUNTIME>")
        log_rank0("")
