import os

import pytest

from sysexamples.file_demos import (
    FILE_DATA,
    dir_list_main,
    file_rw_demo,
    list_directory,
    read_chunks,
    write_all,
)


def test_write_all_writes_everything(tmp_path):
    target = tmp_path / "out.bin"
    data = FILE_DATA.encode()
    fd = os.open(target, os.O_CREAT | os.O_WRONLY, 0o666)
    try:
        assert write_all(fd, data) == len(data)
    finally:
        os.close(fd)
    assert target.read_bytes() == data


def test_read_chunks_sizes_and_content(tmp_path):
    target = tmp_path / "in.bin"
    target.write_bytes(b"abcdefghijkl")
    chunks = list(read_chunks(target, 5))
    assert [len(chunk) for chunk in chunks] == [5, 5, 2]
    assert b"".join(chunks) == b"abcdefghijkl"


def test_read_chunks_rejects_bad_size(tmp_path):
    target = tmp_path / "in.bin"
    target.write_bytes(b"x")
    with pytest.raises(ValueError):
        list(read_chunks(target, 0))


def test_file_rw_demo_round_trip(tmp_path, capsys):
    target = tmp_path / "temp.dat"
    assert file_rw_demo(target) == FILE_DATA.encode()
    assert not target.exists()
    assert FILE_DATA in capsys.readouterr().out


def test_list_directory(tmp_path):
    (tmp_path / "a").write_text("1")
    (tmp_path / "b").mkdir()
    assert sorted(list_directory(tmp_path)) == ["a", "b"]


def test_list_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(tmp_path / "missing")


def test_dir_list_main_prints_names(tmp_path, capsys):
    (tmp_path / "entry").write_text("")
    assert dir_list_main([str(tmp_path)]) == 0
    assert "name: entry" in capsys.readouterr().out.splitlines()


def test_dir_list_main_reports_error(tmp_path, capsys):
    assert dir_list_main([str(tmp_path / "missing")]) == 0
    assert capsys.readouterr().out.startswith("An error has occurred: ")