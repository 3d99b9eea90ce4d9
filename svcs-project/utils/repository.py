# What it does: Knows the on-disk layout of the store and creates it on first use
# How it does: Every other module receives the store root path returned by `open_store` and builds its file paths through the helpers below, so there is no process-wide state
# What data structure it uses: Tree (the store is a directory holding three flat files and one directory of commits)

import os

DEFAULT_STORE_DIR = 'vcs'
STORE_DIR_ENV = 'SVCS_DIR'

COMMITS_DIR = 'commits'
CONFIG_FILE = 'config.txt'
INDEX_FILE = 'index.txt'
LOG_FILE = 'log.txt'

TEMP_PREFIX = 'temp-'

def get_store_dir(): # The store location for this process: $SVCS_DIR if set, otherwise ./vcs
    return os.environ.get(STORE_DIR_ENV) or DEFAULT_STORE_DIR

def init_store(store_root): # Creates the commits directory and the three empty bookkeeping files
    os.makedirs(os.path.join(store_root, COMMITS_DIR), exist_ok=True)
    for filename in (CONFIG_FILE, INDEX_FILE, LOG_FILE):
        file_path = os.path.join(store_root, filename)
        if not os.path.exists(file_path):
            open(file_path, 'w').close()
    return store_root

def open_store(store_root=None): # Returns the store root, initializing the layout if the directory does not exist yet
    if store_root is None:
        store_root = get_store_dir()
    if not os.path.isdir(store_root):
        init_store(store_root)
    return store_root

def get_file_path(store_root, filename):
    return os.path.join(store_root, filename)

def get_commits_dir(store_root):
    return os.path.join(store_root, COMMITS_DIR)

def get_commit_dir(store_root, commit_id):
    return os.path.join(store_root, COMMITS_DIR, commit_id)

def get_temp_dir(store_root, uuid):
    return os.path.join(store_root, COMMITS_DIR, TEMP_PREFIX + uuid)

def is_valid_commit_id(commit_id):
    """
    A commit id must name a single entry directly under commits/ and must not
    point at a staging area that was never finalized.
    """
    if not commit_id or commit_id in ('.', '..'):
        return False
    if os.sep in commit_id or (os.altsep and os.altsep in commit_id):
        return False
    return not commit_id.startswith(TEMP_PREFIX)

def has_line_break(value): # Store files are line-oriented, so no field may contain \n or \r
    return '\n' in value or '\r' in value

def read_lines(store_root, filename): # Returns the non-empty lines of a store file, in file order
    with open(get_file_path(store_root, filename), 'r', newline='\n') as f:
        return [line.rstrip('\r\n') for line in f if line.strip()]

def append_line(store_root, filename, line):
    with open(get_file_path(store_root, filename), 'a', newline='') as f:
        f.write(f"{line}\n")
