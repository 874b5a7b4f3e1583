import pytest

from renamer.cases import InvalidName
from renamer.models import EntryAction, RenameOptions
from renamer.rename import RenameError, decode_content, rename_project


@pytest.fixture
def project(tmp_path):
    """
    test-project
    ├── test-dir-1
    │   ├── test-dir-test-project
    │   │   └── test-file-test-project.txt
    │   └── test-file-2.txt
    └── test-file-1.txt
    """
    root = tmp_path / "test-project"
    (root / "test-dir-1" / "test-dir-test-project").mkdir(parents=True)
    (root / "test-dir-1" / "test-file-2.txt").write_text("Test Project")
    (root / "test-file-1.txt").write_text("test-project")
    (root / "test-dir-1" / "test-dir-test-project" / "test-file-test-project.txt").write_text("test_project")
    return root


def test_rename_project(project, tmp_path):
    report = rename_project(project, "copied-project")

    out = tmp_path / "copied-project"
    assert report.output == str(out)
    assert report.old_name == ["test", "project"]
    assert report.new_name == ["copied", "project"]

    assert (out / "test-file-1.txt").read_text() == "copied-project"
    assert (out / "test-dir-1" / "test-file-2.txt").read_text() == "Copied Project"
    nested = out / "test-dir-1" / "test-dir-copied-project" / "test-file-copied-project.txt"
    assert nested.read_text() == "copied_project"

    # the input is left untouched
    assert (project / "test-file-1.txt").read_text() == "test-project"
    assert report.counts[EntryAction.REWRITTEN.value] == 3


def test_rename_project_copies_binary(project, tmp_path):
    raw = b"\xff\xfe\x00test-project"
    (project / "test-project.bin").write_bytes(raw)

    report = rename_project(project, "copied-project")

    assert (tmp_path / "copied-project" / "copied-project.bin").read_bytes() == raw
    binary = [i for i in report.items if i.action is EntryAction.COPIED_BINARY]
    assert len(binary) == 1
    assert binary[0].target.endswith("copied-project.bin")


def test_rename_project_keeps_unrelated_files(project, tmp_path):
    (project / "README.md").write_text("nothing to see")

    report = rename_project(project, "copied-project")

    assert (tmp_path / "copied-project" / "README.md").read_text() == "nothing to see"
    assert report.counts[EntryAction.UNCHANGED.value] == 1


def test_rename_project_copies_empty_directories(project, tmp_path):
    (project / "test_project_data").mkdir()

    rename_project(project, "copied-project")

    assert (tmp_path / "copied-project" / "copied_project_data").is_dir()


def test_rename_project_skips_existing(project, tmp_path):
    out = tmp_path / "copied-project"
    out.mkdir()
    (out / "test-file-1.txt").write_text("keep")

    report = rename_project(project, "copied-project")

    assert (out / "test-file-1.txt").read_text() == "keep"
    assert report.counts[EntryAction.SKIPPED_EXISTING.value] == 1

    rename_project(project, "copied-project", options=RenameOptions(overwrite=True))
    assert (out / "test-file-1.txt").read_text() == "copied-project"


def test_rename_project_dry_run(project, tmp_path):
    report = rename_project(project, "copied-project", options=RenameOptions(dry_run=True))

    assert report.dry_run is True
    assert not (tmp_path / "copied-project").exists()
    assert report.counts[EntryAction.REWRITTEN.value] == 3
    assert report.counts[EntryAction.MKDIR.value] == 3


def test_rename_project_explicit_output(project, tmp_path):
    out = tmp_path / "elsewhere" / "copied-project"

    report = rename_project(project, "copied-project", output_dir=out)

    assert report.output == str(out)
    assert (out / "test-file-1.txt").read_text() == "copied-project"


def test_rename_project_output_inside_input(project):
    with pytest.raises(RenameError):
        rename_project(project, "copied-project", output_dir=project / "copied-project")


def test_rename_project_same_name(project):
    with pytest.raises(RenameError):
        rename_project(project, "test-project")


def test_rename_project_input_not_a_directory(project):
    with pytest.raises(RenameError):
        rename_project(project / "test-file-1.txt", "copied-project")


@pytest.mark.parametrize("new_name", ["", "copied__project"])
def test_rename_project_invalid_name(project, new_name):
    with pytest.raises(InvalidName):
        rename_project(project, new_name)


def test_decode_content():
    assert decode_content("Montréal".encode("utf-8")) == ("Montréal", "utf-8")
    assert decode_content(b"\xff\xfe\x00\x81") == (None, None)


def test_rename_project_detect_encoding(project, tmp_path):
    # Include a Latin-1 character to force non-UTF-8 handling
    text = "Le projet test-project est maintenu à Montréal par une équipe très réduite.\n" * 5
    raw = text.encode("latin-1")
    (project / "notes.txt").write_bytes(raw)

    rename_project(project, "copied-project", options=RenameOptions(detect_encoding=True))

    out = (tmp_path / "copied-project" / "notes.txt").read_bytes()
    assert out == raw.replace(b"test-project", b"copied-project")


def test_rename_project_detect_encoding_falls_back_to_copy(project, tmp_path):
    raw = ("Le projet test-project est maintenu à Montréal par une équipe très réduite.\n" * 5).encode("latin-1")
    (project / "notes.txt").write_bytes(raw)

    report = rename_project(project, "新-project", options=RenameOptions(detect_encoding=True))

    out = tmp_path / "新-project"
    assert (out / "notes.txt").read_bytes() == raw
    assert (out / "test-file-1.txt").read_text(encoding="utf-8") == "新-project"
    notes = [i for i in report.items if i.source.endswith("notes.txt")]
    assert notes[0].action is EntryAction.COPIED_BINARY
