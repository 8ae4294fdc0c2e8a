from mystd.directory import DirFile
from mystd.files import RegularFile
from mystd.text_files import LogFile, TextFile


def _populate(folder):
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "a.log").write_text("log line\n")
    (folder / "b.txt").write_text("text body")
    (folder / "c.bin").write_bytes(b"\x01\x02")
    (folder / "sub").mkdir()


def test_constructor_creates_directory(tmp_path):
    target = tmp_path / "x" / "y"
    directory = DirFile(target)
    assert target.is_dir()
    assert not directory.is_open()


def test_open_maps_suffixes_to_types(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder, True)
    assert directory.is_open()
    kinds = {file.name: type(file) for file in directory.files()}
    assert kinds == {"a.log": LogFile, "b.txt": TextFile, "c.bin": RegularFile}


def test_files_opens_directory(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder)
    names = [file.name for file in directory.files()]
    assert names == ["a.log", "b.txt", "c.bin"]
    assert directory.is_open()


def test_close_forgets_files(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder, True)
    directory.close()
    assert not directory.is_open()
    assert len(directory.files()) == 3


def test_close_writes_back_opened_files(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder)
    binary = next(file for file in directory.files() if file.name == "c.bin")
    binary.data().extend(b"\x03")
    directory.close()
    assert (folder / "c.bin").read_bytes() == b"\x01\x02\x03"


def test_append_goes_to_every_file(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder)
    directory += "!"
    assert (folder / "a.log").read_text() == "log line\n!"
    assert (folder / "b.txt").read_text() == "text body!"
    assert (folder / "c.bin").read_bytes() == b"\x01\x02!"


def test_delete_removes_tree(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    directory = DirFile(folder, True)
    directory.delete()
    assert not folder.exists()
    assert not directory.is_open()


def test_copy_of_copies_files(tmp_path):
    source = tmp_path / "src"
    _populate(source)
    original = DirFile(source)
    copy = DirFile.copy_of(original, tmp_path / "dst", True)
    target = tmp_path / "dst"
    assert (target / "a.log").read_text() == "log line\n"
    assert (target / "b.txt").read_text() == "text body"
    assert (target / "c.bin").read_bytes() == b"\x01\x02"
    assert [file.name for file in copy.files()] == ["a.log", "b.txt", "c.bin"]
    assert not original.is_open()
    assert (source / "b.txt").read_text() == "text body"


def test_assign_from_replaces_contents(tmp_path):
    source = tmp_path / "src"
    _populate(source)
    target = tmp_path / "dst"
    target.mkdir()
    (target / "stale.txt").write_text("old")
    directory = DirFile(target)
    result = directory.assign_from(DirFile(source))
    assert result is directory
    assert sorted(entry.name for entry in target.iterdir()) == ["a.log", "b.txt", "c.bin"]


def test_context_manager(tmp_path):
    folder = tmp_path / "d"
    _populate(folder)
    with DirFile(folder) as directory:
        assert directory.is_open()
        count = len(directory.files())
    assert count == 3
    assert not directory.is_open()