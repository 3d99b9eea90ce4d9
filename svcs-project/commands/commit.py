# The command: svcs commit "<message>"
# What it does: Saves a full copy of every tracked file as a new commit, unless the exact same content is already committed
# How it does: It creates a commit promise, feeds it every path from the index (each file is hashed and staged into a temporary directory in one read), then asks the commit store to finalize it. The store renames the staging directory to the content hash and appends a log entry, or throws the staging directory away when that hash already exists
# What data structure it uses: Hash Table / Dictionary (the content-addressed commit store), List (the index)

import sys
from utils import index as index_utils, objects, snapshot
from utils.errors import EmptyFileError

DESCRIPTION = "Save changes."

def run(args):
    if not args.message:
        print("Message was not passed.")
        return

    try:
        committed = create_commit(args.store_root, args.message)
    except (OSError, ValueError) as e:
        print(f"Error during commit: {e}", file=sys.stderr)
        sys.exit(1)

    if not committed:
        print("Nothing to commit.")
        return
    print("Changes are committed.")

def create_commit(store_root, message): # Returns True if a new commit was recorded
    promise = snapshot.create_commit_promise(store_root, message)
    try:
        index_utils.read_index(store_root, promise.copy_file)
        return objects.commit(store_root, promise)
    except EmptyFileError:
        return False
    except OSError:
        promise.discard()
        raise
