"""General-purpose utilities: errors, bits, the Z-function, argument parsing, a trie, file and directory wrappers, a file logger, queues and a mutable string."""

__version__ = "0.1.0"

__all__ = [
    "arg_parser",
    "bits",
    "containers",
    "directory",
    "errors",
    "files",
    "logger",
    "text_files",
    "text_string",
    "trie",
    "zfunction",
]