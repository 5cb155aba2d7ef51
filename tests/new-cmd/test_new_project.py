"""Tests for new_project: creating a project from the bundled template."""

import os

import pytest

from projseed.errors import (
    ArchiveCorrupt,
    FileAlreadyExists,
    InvalidProjectName,
    NonUtf8TextMember,
    ProjectAlreadyExists,
)
from projseed.new_cmd.new_project import new_project, validate_project_name


@pytest.mark.unit
class TestValidateProjectName:

    @pytest.mark.parametrize("name", ["flipper", "my_contract", "a1", "Erc20"])
    def test_accepts_valid_names(self, name):
        validate_project_name(name)

    @pytest.mark.parametrize("name", ["my-contract", "has space", "dot.name", "slash/name"])
    def test_rejects_non_identifier_characters(self, name):
        with pytest.raises(InvalidProjectName, match="alphanumeric characters and underscores"):
            validate_project_name(name)

    @pytest.mark.parametrize("name", ["1project", "_private", ""])
    def test_rejects_names_not_starting_with_a_letter(self, name):
        with pytest.raises(InvalidProjectName, match="must begin with an alphabetic character"):
            validate_project_name(name)


@pytest.mark.unit
class TestNewProjectFromBundledTemplate:

    def test_returns_creation_message(self, tmp_path):
        assert new_project("flipper", tmp_path) == "Created project flipper"

    def test_manifest_names_the_project(self, tmp_path):
        new_project("flipper", tmp_path)

        manifest = (tmp_path / "flipper" / "Cargo.toml").read_text()
        assert 'name = "flipper"' in manifest
        assert "{{name}}" not in manifest

    def test_library_uses_camel_case_name(self, tmp_path):
        new_project("my_token", tmp_path)

        lib = (tmp_path / "my_token" / "src" / "lib.rs").read_text()
        assert "pub struct MyToken {" in lib
        assert 'pub const NAME: &str = "my_token";' in lib
        assert "{{camel_name}}" not in lib

    def test_library_keeps_non_ascii_letters_in_camel_case_name(self, tmp_path):
        new_project("straße_app", tmp_path)

        lib = (tmp_path / "straße_app" / "src" / "lib.rs").read_text(encoding="utf-8")
        assert "pub struct StraßeApp {" in lib
        assert 'pub const NAME: &str = "straße_app";' in lib

    def test_includes_hidden_files(self, tmp_path):
        new_project("flipper", tmp_path)

        assert (tmp_path / "flipper" / ".gitignore").is_file()

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        new_project("flipper")

        assert (tmp_path / "flipper" / "Cargo.toml").is_file()

    def test_leaves_no_staging_directory_behind(self, tmp_path):
        new_project("flipper", tmp_path)

        assert os.listdir(tmp_path) == ["flipper"]

    def test_creates_missing_target_dir(self, tmp_path):
        new_project("flipper", tmp_path / "work" / "projects")

        assert (tmp_path / "work" / "projects" / "flipper" / "Cargo.toml").is_file()

    def test_unique_names_from_sequence_do_not_collide(self, tmp_path, name_sequence):
        first, second = name_sequence.next(), name_sequence.next()

        new_project(first, tmp_path)
        new_project(second, tmp_path)

        assert (tmp_path / first / "Cargo.toml").is_file()
        assert (tmp_path / second / "Cargo.toml").is_file()

    def test_fixture_project_has_manifest(self, new_project_dir):
        assert (new_project_dir / "Cargo.toml").is_file()
        assert f'name = "{new_project_dir.name}"' in (new_project_dir / "Cargo.toml").read_text()


@pytest.mark.unit
class TestNewProjectIntoExistingDirectory:

    def test_refuses_directory_with_manifest(self, tmp_path):
        (tmp_path / "flipper").mkdir()
        (tmp_path / "flipper" / "Cargo.toml").write_text("[package]\n")

        with pytest.raises(ProjectAlreadyExists, match="already exists in flipper"):
            new_project("flipper", tmp_path)

    def test_scaffolds_into_existing_directory_without_manifest(self, tmp_path):
        (tmp_path / "flipper").mkdir()
        (tmp_path / "flipper" / "notes.txt").write_text("keep me")

        new_project("flipper", tmp_path)

        assert (tmp_path / "flipper" / "Cargo.toml").is_file()
        assert (tmp_path / "flipper" / "notes.txt").read_text() == "keep me"

    def test_existing_source_file_is_not_overwritten(self, tmp_path):
        (tmp_path / "flipper" / "src").mkdir(parents=True)
        (tmp_path / "flipper" / "src" / "lib.rs").write_text("// mine")

        with pytest.raises(FileAlreadyExists):
            new_project("flipper", tmp_path)

        assert (tmp_path / "flipper" / "src" / "lib.rs").read_text() == "// mine"


@pytest.mark.unit
class TestNewProjectWithCustomTemplate:

    def test_uses_given_template(self, tmp_path, make_archive):
        template = make_archive([("README.md", "# {{camel_name}}\n")])

        new_project("demo_app", tmp_path, template=template)

        assert (tmp_path / "demo_app" / "README.md").read_text() == "# DemoApp\n"

    def test_failed_scaffold_leaves_nothing_behind(self, tmp_path, make_archive):
        template = make_archive([
            ("Cargo.toml", 'name = "{{name}}"\n'),
            ("logo.png", b"\x89PNG\xff\xfe"),
        ])

        with pytest.raises(NonUtf8TextMember):
            new_project("flipper", tmp_path, template=template)

        assert os.listdir(tmp_path) == []

    def test_corrupt_template_fails_before_writing(self, tmp_path):
        with pytest.raises(ArchiveCorrupt):
            new_project("flipper", tmp_path, template=b"garbage")

        assert os.listdir(tmp_path) == []

    def test_invalid_name_fails_before_writing(self, tmp_path):
        with pytest.raises(InvalidProjectName):
            new_project("bad-name", tmp_path)

        assert os.listdir(tmp_path) == []
