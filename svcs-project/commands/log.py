# The command: svcs log
# What it does: Displays the commit history, most recent commit first
# How it does: Reads every line of the log into a list and walks it in reverse
# What data structure it uses: List (the log entries)

import sys
from utils import history
from utils.errors import EmptyFileError, MalformedLogError

DESCRIPTION = "Show commit logs."

def print_entry(commit_hash, author, message):
    print(f"commit {commit_hash}")
    print(f"Author: {author}")
    print(message)

def run(args):
    try:
        history.read_log(args.store_root, print_entry)
    except EmptyFileError:
        print("No commits yet.")
    except (OSError, MalformedLogError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
