# What it does: Provides centralized read/write operations for the store's `index.txt` file
# How it does: The index is append-only, one tracked working-directory path per line. Paths are never deduplicated or removed
# What data structure it uses: List (tracked paths, in the order they were added)

from .errors import EmptyFileError
from .repository import INDEX_FILE, append_line, has_line_break, read_lines

def read_index(store_root, callback=None):
    """
    Returns the tracked paths in the order they were added.
    Calls `callback(path)` for each one when given.
    Raises EmptyFileError if nothing has been tracked yet.
    """
    paths = read_lines(store_root, INDEX_FILE)
    if not paths:
        raise EmptyFileError("no tracked files")

    if callback is not None:
        for path in paths:
            callback(path)
    return paths

def write_to_index(store_root, path): # Appends a path to the index
    if has_line_break(path):
        raise ValueError(f"Error: invalid path {path!r}.")
    append_line(store_root, INDEX_FILE, path)
