from fakepico.fileio import get_file_buffer, get_file_contents


def test_contents_round_trip(tmp_path):
    path = tmp_path / "cart.p8"
    text = "__lua__\nprint('\u2b05')\n"
    path.write_bytes(text.encode("utf-8"))
    assert get_file_contents(path) == text


def test_buffer_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256))
    path.write_bytes(payload)
    assert get_file_buffer(path) == payload


def test_missing_file_gives_empty(tmp_path):
    missing = tmp_path / "absent.p8"
    assert get_file_contents(missing) == ""
    assert get_file_buffer(missing) == b""


def test_invalid_utf8_kept_in_length(tmp_path):
    path = tmp_path / "raw.p8"
    path.write_bytes(b"a\xffb")
    assert len(get_file_contents(path)) == 3