# The command: svcs add [<file>]
# What it does: Lists the tracked files, or starts tracking a new one
# How it does: With no argument it reads the index and prints every path. With a path it checks the file exists and appends the path to the index as given; the index is append-only and is not deduplicated
# What data structure it uses: List (the index, in the order files were added)

import os
import sys
from utils import index as index_utils
from utils.errors import EmptyFileError

DESCRIPTION = "Add a file to the index."

def run(args):
    store_root = args.store_root

    if not args.file:
        try:
            tracked = index_utils.read_index(store_root)
        except EmptyFileError:
            print("Add a file to the index.")
            return
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(1)

        print("Tracked files:")
        for path in tracked:
            print(path)
        return

    file_path = args.file
    if not os.path.isfile(file_path):
        print(f"Can't find '{file_path}'.")
        return

    try:
        index_utils.write_to_index(store_root, file_path)
    except (OSError, ValueError) as e:
        print(f"Error adding file {file_path}: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"The file '{file_path}' is tracked.")
