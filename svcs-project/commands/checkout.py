# The command: svcs checkout <commit-id>
# What it does: Restores every tracked file to the content stored in the given commit
# How it does: Looks up `commits/<commit-id>`, then for each path in the current index copies the file with the same base name back over the working file. The index itself is not versioned, so the current list of tracked files is used
# What data structure it uses: Hash Table (commit store lookup by hash), List (the index)

import sys
from utils import objects
from utils.errors import CommitNotFoundError, FileMissingFromCommitError

DESCRIPTION = "Restore a file."

def run(args):
    commit_id = args.commit_id
    if not commit_id:
        print("Commit id was not passed.")
        return

    try:
        objects.checkout(args.store_root, commit_id)
    except CommitNotFoundError:
        print("Commit does not exist.")
        return
    except FileMissingFromCommitError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error restoring files: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Switched to commit {commit_id}.")
