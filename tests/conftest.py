# Shared pytest fixtures for SVCS tests

import pytest
import os
import sys
import shutil
import tempfile

# Add svcs-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'svcs-project'))

from utils import repository, config, index as index_utils


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_store(temp_dir, monkeypatch):
    # Creates an initialized store at ./vcs inside a temporary working directory
    monkeypatch.delenv(repository.STORE_DIR_ENV, raising=False)
    os.chdir(temp_dir)
    store_root = repository.init_store(repository.DEFAULT_STORE_DIR)
    yield store_root


@pytest.fixture
def store_with_user(temp_store):
    # A store with a configured username
    config.write_config(temp_store, 'alice')
    return temp_store


@pytest.fixture
def store_with_file(store_with_user):
    # A store tracking a single file 'a.txt' containing 'hello'
    write_file('a.txt', 'hello')
    index_utils.write_to_index(store_with_user, 'a.txt')
    return store_with_user


def write_file(path, content):
    dir_name = os.path.dirname(path)
    if dir_name:
        os.makedirs(dir_name, exist_ok=True)
    with open(path, 'w') as f:
        f.write(content)


def read_file(path):
    with open(path, 'r') as f:
        return f.read()


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
