"""Dense matrices with linear algebra and an expression language, plus string helpers."""

__version__ = "0.1.0"

__all__ = [
    "matrix",
    "vector",
    "decomp",
    "expr",
    "textbuf",
    "feeder",
    "strutil",
]