"""String helpers, a string buffer, stack, vector and binary search tree, line input, a test reporter and file helpers."""

__version__ = "0.1.0"
__all__ = [
    "strlib",
    "cmpfn",
    "strbuf",
    "stack",
    "vector",
    "bst",
    "simpio",
    "testreport",
    "filelib",
]