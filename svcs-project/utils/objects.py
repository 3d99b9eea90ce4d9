# What it does: Manages the commit store, turning staged snapshots into permanent commits and restoring them into the working directory
# How it does: It implements a content-addressed store. A commit directory is named by the hex digest of the tracked files' bytes, so committing identical content twice finds the existing directory and writes nothing new. A new commit is renamed into place first and logged second, so a log entry never points at a missing directory
# What data structure it uses: Hash Table / Dictionary (the `commits/` directory is a content-addressed map from digest to a flat copy of the tracked files)
#
# The existence check and the rename are two separate filesystem calls with no lock between them.
# Two processes committing the same content at once can both pass the check; only one single user is supported.

import os

from . import repository
from .errors import CommitNotFoundError, EmptyFileError, FileMissingFromCommitError
from .history import write_log
from .index import read_index

def commit_exists(store_root, commit_id):
    if not repository.is_valid_commit_id(commit_id):
        return False
    return os.path.isdir(repository.get_commit_dir(store_root, commit_id))

def commit(store_root, promise):
    """
    Finalizes a commit promise.
    Returns True if a new commit was stored and logged, False if there was
    nothing to commit (no tracked files were staged, or the same content is
    already stored).
    """
    if promise.is_empty:
        promise.discard()
        return False

    commit_hash = promise.hexdigest()
    commit_dir = repository.get_commit_dir(store_root, commit_hash)
    if os.path.exists(commit_dir):
        promise.discard()
        return False

    os.rename(promise.temp_dir_path, commit_dir)
    write_log(store_root, commit_hash, promise.username, promise.message)
    return True

def checkout(store_root, commit_id):
    """
    Overwrites every currently tracked file with its copy from the given commit.
    Files are restored in index order; the first one missing from the commit
    stops the checkout, leaving the files before it already restored.
    A working file that was deleted since the commit is recreated, together
    with any missing parent directory, instead of failing.
    Returns the list of restored paths.
    """
    if not commit_exists(store_root, commit_id):
        raise CommitNotFoundError(commit_id)
    commit_dir = repository.get_commit_dir(store_root, commit_id)

    try:
        tracked_paths = read_index(store_root)
    except EmptyFileError:
        return []

    restored = []
    for dst_path in tracked_paths:
        src_path = os.path.join(commit_dir, os.path.basename(dst_path))
        if not os.path.isfile(src_path):
            raise FileMissingFromCommitError(commit_id, dst_path)

        with open(src_path, 'rb') as f:
            content = f.read()

        # Ensure directory exists before writing
        dir_name = os.path.dirname(dst_path)
        if dir_name and not os.path.exists(dir_name):
            os.makedirs(dir_name, exist_ok=True)

        with open(dst_path, 'wb') as f_work:
            f_work.write(content)
        restored.append(dst_path)

    return restored
