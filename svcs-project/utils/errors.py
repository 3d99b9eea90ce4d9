# What it does: Defines the exceptions the store raises for "nothing there" conditions, so commands can print a friendly message instead of an error
# What data structure it uses: None, just a small class hierarchy

class SvcsError(Exception):
    pass

class EmptyFileError(SvcsError): # The index or the log has no entries yet
    pass

class CommitNotFoundError(SvcsError, LookupError):
    def __init__(self, commit_id):
        super().__init__(f"commit not found: {commit_id}")
        self.commit_id = commit_id

class FileMissingFromCommitError(SvcsError, LookupError): # A tracked file has no copy inside the commit directory
    def __init__(self, commit_id, path):
        super().__init__(f"'{path}' is not part of commit {commit_id}")
        self.commit_id = commit_id
        self.path = path

class MalformedLogError(SvcsError, ValueError):
    def __init__(self, line_number, line):
        super().__init__(f"malformed log entry on line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line
