# What it does: Reads and appends the commit log, `log.txt`
# How it does: Each commit is one line `hash,author,message`. Only the first two commas separate fields, the rest of the line is the message verbatim
# What data structure it uses: List (entries are read in file order, then walked in reverse for newest-first display)

from collections import namedtuple

from .errors import EmptyFileError, MalformedLogError
from .repository import LOG_FILE, append_line, has_line_break, read_lines

SEPARATOR = ','

LogEntry = namedtuple('LogEntry', ['hash', 'author', 'message'])

def format_entry(commit_hash, author, message):
    return SEPARATOR.join([commit_hash, author, message])

def parse_entry(line, line_number=0):
    fields = line.split(SEPARATOR, 2)
    if len(fields) != 3:
        raise MalformedLogError(line_number, line)
    return LogEntry(*fields)

def write_log(store_root, commit_hash, author, message): # Appends one entry; the caller has already created the commit directory
    if has_line_break(message) or has_line_break(author):
        raise ValueError("Error: log fields must be single-line.")
    append_line(store_root, LOG_FILE, format_entry(commit_hash, author, message))

def read_log(store_root, callback=None):
    """
    Returns the log entries, most recent first.
    Calls `callback(hash, author, message)` once per entry in that same order.
    Raises EmptyFileError if no commit has been made yet.
    """
    lines = read_lines(store_root, LOG_FILE)
    if not lines:
        raise EmptyFileError("no commits")

    entries = [parse_entry(line, number) for number, line in enumerate(lines, start=1)]
    entries.reverse()

    if callback is not None:
        for entry in entries:
            callback(entry.hash, entry.author, entry.message)
    return entries
