__version__ = "0.1.0"

from BINSEARCHpy.errors import InvalidInputError, NotSortedError
from BINSEARCHpy.locate import locate_index, locate_many

__all__ = [
    "InvalidInputError",
    "NotSortedError",
    "locate_index",
    "locate_many",
]
