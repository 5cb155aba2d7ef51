"""Shared fixtures for new-cmd tests."""

import pytest

from projseed.naming import NameSequence
from projseed.new_cmd.new_project import new_project


@pytest.fixture(scope="session")
def name_sequence():
    """One name sequence for the whole session, so no two tests share a project name."""
    return NameSequence("new_project")


@pytest.fixture
def new_project_dir(tmp_path, name_sequence):
    """Create a project from the bundled template and return its directory."""
    name = name_sequence.next()
    new_project(name, tmp_path)
    return tmp_path / name
