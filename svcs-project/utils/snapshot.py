# What it does: Stages a candidate commit (a "commit promise") before its content hash is known
# How it does: Each tracked file is read once; the same bytes feed the running digest and are written to a private `commits/temp-<uuid>` directory under the file's base name
# What data structure it uses: Set (paths already copied, so each file is staged at most once)

import os
import shutil

from . import repository
from .config import read_config
from .hashing import new_digest
from .identifiers import generate_uuid

class CommitPromise:
    def __init__(self, uuid, digest, temp_dir_path, username, message):
        self.uuid = uuid
        self.digest = digest
        self.temp_dir_path = temp_dir_path
        self.username = username
        self.message = message
        self.copied = set()
        self._dir_created = False

    @property
    def is_empty(self):
        return not self.copied

    def copy_file(self, src_path): # Hashes and stages one tracked file
        if src_path in self.copied:
            return

        # The staging dir only exists once a source file was read successfully
        with open(src_path, 'rb') as f:
            content = f.read()

        if not self._dir_created:
            os.makedirs(self.temp_dir_path, exist_ok=True)
            self._dir_created = True

        self.digest.update(content)
        dst_path = os.path.join(self.temp_dir_path, os.path.basename(src_path))
        with open(dst_path, 'wb') as f:
            f.write(content)
        self.copied.add(src_path)

    def copy_files(self, src_paths):
        for src_path in src_paths:
            self.copy_file(src_path)

    def hexdigest(self):
        return self.digest.hexdigest()

    def discard(self): # Removes the staging directory, if one was created
        if self._dir_created and os.path.isdir(self.temp_dir_path):
            shutil.rmtree(self.temp_dir_path)
        self._dir_created = False

def create_commit_promise(store_root, message, digest_factory=new_digest): # Starts a new commit attempt authored by the configured user
    if repository.has_line_break(message):
        raise ValueError("Error: commit message must be a single line.")
    uuid = generate_uuid()
    username = read_config(store_root)
    return CommitPromise(
        uuid=uuid,
        digest=digest_factory(),
        temp_dir_path=repository.get_temp_dir(store_root, uuid),
        username=username,
        message=message,
    )
