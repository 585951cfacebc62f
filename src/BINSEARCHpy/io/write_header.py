from functools import wraps

from BINSEARCHpy.io.log_module import log_rank0


def write_header(msg):
    """
    Print out the given header message msg.

    Parameters:
        msg (str): Header message to be printed.
    """

    if len(msg) >= 66:
        raise ValueError(f"message longer than 66 characters: {msg}")

    separator = '=' * 70

    log_rank0(f"  {separator}")
    log_rank0(f"  =  {msg:^66s}=")
    log_rank0(f"  {separator}")


def headered_function(msg):
    """Print the header `msg` every time the decorated function is called."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            write_header(msg)
            return func(*args, **kwargs)

        return wrapper

    return decorator
