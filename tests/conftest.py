"""Shared fixtures.

``github_cls`` swaps PyGithub's ``Github`` client for a ``MagicMock`` inside
:mod:`git_storage.storage`; ``repo`` is the mocked ``Repository`` every
content call lands on.  Tests that need real PyGithub request building
use ``responses`` instead and skip these fixtures.
"""

from unittest.mock import patch

import pytest

from git_storage import GitStorage


@pytest.fixture
def github_cls():
    with patch("git_storage.storage.Github") as mock_cls:
        yield mock_cls


@pytest.fixture
def repo(github_cls):
    return github_cls.return_value.get_repo.return_value


@pytest.fixture
def storage(github_cls):
    return GitStorage("owner", "repo", token="ghp_test")
