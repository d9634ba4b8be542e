"""
I/O collaborators: loading matrices from text files, rendering them and the
JSON payload contract.

Kept separate from matcalc.core, which never performs I/O.
"""

from matcalc.io.formatting import format_matrix, format_row
from matcalc.io.loader import LoadErrorKind, MatrixLoadResult, load_matrix, parse_matrix_text

__all__ = [
    # Loader
    "LoadErrorKind",
    "MatrixLoadResult",
    "load_matrix",
    "parse_matrix_text",
    # Formatting
    "format_matrix",
    "format_row",
]
