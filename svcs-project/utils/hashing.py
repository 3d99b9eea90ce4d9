# What it does: Provides the streaming digest that turns a commit's tracked-file bytes into its content address
# How it does: Wraps a `hashlib` algorithm behind a small reset/update/finalize interface so the commit store never depends on a specific hash function
# What data structure it uses: None directly; the underlying hash object keeps a fixed-size internal state

import hashlib

DEFAULT_ALGORITHM = 'sha256'

class Digest:
    """
    The capability the snapshot builder needs from a hash function.
    Subclasses must implement reset(), update() and finalize().
    """

    def reset(self):
        raise NotImplementedError

    def update(self, data):
        raise NotImplementedError

    def finalize(self): # Returns the digest as raw bytes
        raise NotImplementedError

    def hexdigest(self):
        return self.finalize().hex()

class HashlibDigest(Digest):
    def __init__(self, algorithm=DEFAULT_ALGORITHM):
        self.algorithm = algorithm
        self._hash = hashlib.new(algorithm)

    def reset(self):
        self._hash = hashlib.new(self.algorithm)

    def update(self, data):
        self._hash.update(data)

    def finalize(self):
        # digest() leaves the hash state untouched
        return self._hash.digest()

    @property
    def digest_size(self):
        return self._hash.digest_size

def new_digest(algorithm=DEFAULT_ALGORITHM): # Default digest factory used for new commits
    return HashlibDigest(algorithm)
