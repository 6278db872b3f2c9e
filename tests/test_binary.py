import pytest

from fastparsex.binary import BinaryParser, BinaryReader
from fastparsex.errors import ErrorCode, FastParseError


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "s.bin"
    path.write_bytes(bytes(range(16)))
    return path


def test_read_all(sample):
    assert BinaryReader(sample).read_all() == bytes(range(16))


def test_read_all_empty(tmp_path):
    path = tmp_path / "e.bin"
    path.write_bytes(b"")
    assert BinaryReader(path).read_all() == b""


def test_read_all_missing(tmp_path):
    with pytest.raises(FastParseError) as info:
        BinaryReader(tmp_path / "x.bin").read_all()
    assert info.value.code is ErrorCode.FILE_NOT_FOUND


def test_read_block_inside(sample):
    assert BinaryParser(sample).read_block(4, 3) == bytes([4, 5, 6])


def test_read_block_padded_past_end(tmp_path):
    path = tmp_path / "abc.bin"
    path.write_bytes(b"abc")
    block = BinaryParser(path).read_block(1, 4)
    assert block == b"bc\x00\x00"


def test_read_block_beyond_end_is_zeros(sample):
    assert BinaryParser(sample).read_block(100, 2) == b"\x00\x00"


def test_read_block_negative(sample):
    with pytest.raises(ValueError):
        BinaryParser(sample).read_block(-1, 2)


def test_read_block_missing(tmp_path):
    with pytest.raises(FastParseError) as info:
        BinaryParser(tmp_path / "x.bin").read_block(0, 1)
    assert info.value.code is ErrorCode.FILE_NOT_FOUND