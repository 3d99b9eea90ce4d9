# Unit tests for utils/repository.py, utils/config.py, utils/index.py and utils/history.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'svcs-project'))

from utils import repository, config, history, index as index_utils
from utils.errors import EmptyFileError, MalformedLogError


class TestOpenStore:
    # Tests for repository.open_store() / init_store()

    def test_creates_layout(self, temp_dir, monkeypatch):
        monkeypatch.delenv(repository.STORE_DIR_ENV, raising=False)
        os.chdir(temp_dir)

        store_root = repository.open_store()

        assert store_root == 'vcs'
        assert os.path.isdir(os.path.join('vcs', 'commits'))
        for name in ('config.txt', 'index.txt', 'log.txt'):
            path = os.path.join('vcs', name)
            assert os.path.isfile(path)
            assert os.path.getsize(path) == 0

    def test_existing_store_is_left_alone(self, store_with_file):
        repository.open_store(store_with_file)
        assert index_utils.read_index(store_with_file) == ['a.txt']

    def test_env_var_overrides_location(self, temp_dir, monkeypatch):
        custom = os.path.join(temp_dir, 'custom-store')
        monkeypatch.setenv(repository.STORE_DIR_ENV, custom)

        assert repository.open_store() == custom
        assert os.path.isdir(os.path.join(custom, 'commits'))


class TestIsValidCommitId:

    @pytest.mark.parametrize('commit_id', ['', '.', '..', 'a/b', 'temp-1234'])
    def test_rejects(self, commit_id):
        assert not repository.is_valid_commit_id(commit_id)

    def test_accepts_hex_digest(self):
        assert repository.is_valid_commit_id('ab' * 32)


class TestConfig:
    # Tests for config.read_config() / write_config()

    def test_unset_username_is_empty(self, temp_store):
        assert config.read_config(temp_store) == ''

    def test_write_then_read(self, temp_store):
        config.write_config(temp_store, 'alice')
        assert config.read_config(temp_store) == 'alice'

    def test_shorter_name_replaces_longer_one(self, temp_store):
        config.write_config(temp_store, 'bartholomew')
        config.write_config(temp_store, 'bo')

        assert config.read_config(temp_store) == 'bo'
        with open(os.path.join(temp_store, 'config.txt')) as f:
            assert f.read() == 'bo\n'

    def test_rejects_empty_username(self, temp_store):
        with pytest.raises(ValueError):
            config.write_config(temp_store, '   ')

    def test_rejects_carriage_return(self, temp_store):
        with pytest.raises(ValueError):
            config.write_config(temp_store, 'al\rice')
        assert config.read_config(temp_store) == ''


class TestIndex:
    # Tests for index_utils.read_index() / write_to_index()

    def test_empty_index_raises(self, temp_store):
        with pytest.raises(EmptyFileError):
            index_utils.read_index(temp_store)

    def test_preserves_order_and_duplicates(self, temp_store):
        for path in ['b.txt', 'a.txt', 'b.txt']:
            index_utils.write_to_index(temp_store, path)

        assert index_utils.read_index(temp_store) == ['b.txt', 'a.txt', 'b.txt']

    def test_callback_receives_each_path(self, temp_store):
        index_utils.write_to_index(temp_store, 'one.txt')
        index_utils.write_to_index(temp_store, 'dir/two.txt')
        seen = []

        index_utils.read_index(temp_store, seen.append)

        assert seen == ['one.txt', 'dir/two.txt']

    @pytest.mark.parametrize('path', ['a\nb.txt', 'a\rb.txt'])
    def test_rejects_line_breaks_in_path(self, temp_store, path):
        with pytest.raises(ValueError):
            index_utils.write_to_index(temp_store, path)
        with pytest.raises(EmptyFileError):
            index_utils.read_index(temp_store)

    def test_lines_split_on_newline_only(self, temp_store):
        # A hand-edited file with CRLF endings still reads one path per line
        with open(os.path.join(temp_store, 'index.txt'), 'w', newline='') as f:
            f.write('a.txt\r\nb.txt\r\n')

        assert index_utils.read_index(temp_store) == ['a.txt', 'b.txt']


class TestLog:
    # Tests for history.read_log() / write_log()

    def test_empty_log_raises(self, temp_store):
        with pytest.raises(EmptyFileError):
            history.read_log(temp_store)

    def test_most_recent_first(self, temp_store):
        history.write_log(temp_store, 'h1', 'alice', 'first')
        history.write_log(temp_store, 'h2', 'bob', 'second')
        seen = []

        entries = history.read_log(temp_store, lambda h, a, m: seen.append((h, a, m)))

        assert seen == [('h2', 'bob', 'second'), ('h1', 'alice', 'first')]
        assert [e.hash for e in entries] == ['h2', 'h1']

    def test_line_format(self, temp_store):
        history.write_log(temp_store, 'abc', 'alice', 'msg')
        with open(os.path.join(temp_store, 'log.txt')) as f:
            assert f.read() == 'abc,alice,msg\n'

    def test_message_with_commas_is_kept_whole(self, temp_store):
        history.write_log(temp_store, 'abc', 'alice', 'fix a, b, and c')

        entry, = history.read_log(temp_store)

        assert entry == history.LogEntry('abc', 'alice', 'fix a, b, and c')

    def test_comma_in_author_shifts_fields(self, temp_store):
        # Only the first two commas separate fields
        history.write_log(temp_store, 'abc', 'smith, j', 'msg')

        entry, = history.read_log(temp_store)

        assert entry.author == 'smith'
        assert entry.message == ' j,msg'

    def test_malformed_line(self, temp_store):
        with open(os.path.join(temp_store, 'log.txt'), 'w') as f:
            f.write('abc,alice,ok\nbroken line\n')

        with pytest.raises(MalformedLogError) as excinfo:
            history.read_log(temp_store)
        assert excinfo.value.line_number == 2

    def test_multiline_message_is_rejected(self, temp_store):
        with pytest.raises(ValueError):
            history.write_log(temp_store, 'abc', 'alice', 'two\nlines')

    def test_carriage_return_is_rejected(self, temp_store):
        with pytest.raises(ValueError):
            history.write_log(temp_store, 'abc', 'alice', 'fix\rthing')
        with pytest.raises(ValueError):
            history.write_log(temp_store, 'abc', 'al\rice', 'msg')
        with pytest.raises(EmptyFileError):
            history.read_log(temp_store)
