import pytest

from fastparsex.errors import ErrorCode, FastParseError
from fastparsex.log_parser import (
    LogFormat,
    LogParser,
    LogReader,
    apache_combined,
    apache_common,
    custom,
    nginx,
    split_line,
)


def test_config_factories():
    assert apache_common().format is LogFormat.APACHE_COMMON
    assert apache_combined().format is LogFormat.APACHE_COMBINED
    assert nginx().format is LogFormat.NGINX
    cfg = custom("%h %u")
    assert cfg.format is LogFormat.CUSTOM
    assert cfg.custom_pattern == "%h %u"
    assert apache_common().custom_pattern == ""


def test_split_line_whitespace():
    assert split_line("  a\tb  c ") == ["a", "b", "c"]


def test_split_line_stops_at_nul():
    assert split_line("a\0b c") == ["a"]


def test_split_line_keeps_non_c_space():
    assert split_line("a\xa0b") == ["a\xa0b"]


def test_split_line_empty():
    assert split_line("   ") == []


def test_reader_lines(tmp_path):
    path = tmp_path / "l.log"
    path.write_bytes(b"a b\r\n\nlast")
    with LogReader(path) as reader:
        assert list(reader) == ["a b\r", "", "last"]


def test_reader_trailing_newline(tmp_path):
    path = tmp_path / "t.log"
    path.write_text("x\n")
    with LogReader(path) as reader:
        assert list(reader) == ["x"]


def test_reader_missing(tmp_path):
    with pytest.raises(FastParseError) as info:
        LogReader(tmp_path / "none.log")
    assert info.value.code is ErrorCode.FILE_NOT_FOUND


def test_parser_callback(tmp_path):
    path = tmp_path / "p.log"
    path.write_text("1 2\n\n3")
    parser = LogParser(path)
    seen = []
    parser.on_record(seen.append)
    assert parser.parse() == 3
    assert seen == [["1", "2"], [], ["3"]]


def test_parser_records_and_default_config(tmp_path):
    path = tmp_path / "p.log"
    path.write_text("GET /index\n")
    parser = LogParser(path)
    assert parser.config == apache_common()
    assert list(parser.records()) == [["GET", "/index"]]


def test_parse_without_callback_counts(tmp_path):
    path = tmp_path / "p.log"
    path.write_text("a\nb\n")
    assert LogParser(path, nginx()).parse() == 2