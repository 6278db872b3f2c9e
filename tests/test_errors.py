import pytest

from fastparsex.errors import ErrorCode, FastParseError


def test_error_keeps_code_and_message():
    err = FastParseError(ErrorCode.PARSE_ERROR, "bad row")
    assert err.code is ErrorCode.PARSE_ERROR
    assert err.message == "bad row"


def test_str_includes_code_and_message():
    err = FastParseError(ErrorCode.PARSE_ERROR, "bad row")
    assert str(err) == "parse_error: bad row"


def test_str_without_message_is_code_value():
    err = FastParseError(ErrorCode.EOF)
    assert str(err) == ErrorCode.EOF.value
    assert err.message == ""


def test_error_can_be_raised_and_caught():
    err = FastParseError(ErrorCode.IO_ERROR, "disk")
    with pytest.raises(FastParseError) as info:
        raise err
    assert info.value is err
    assert info.value.code is ErrorCode.IO_ERROR
    assert info.value.message == "disk"
    assert str(info.value) == "io_error: disk"


def test_error_codes_are_distinct():
    values = [code.value for code in ErrorCode]
    assert len(values) == len(set(values))
    assert ErrorCode("io_error") is ErrorCode.IO_ERROR