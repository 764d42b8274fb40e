import pytest

from emitscope.core.models import Parameter
from emitscope.errors import InputValueError
from emitscope.interface.inputs import (
    format_return_value,
    input_kind,
    parse_input_value,
    placeholder,
    validate_input,
)


@pytest.mark.parametrize(
    "typ, kind",
    [("uint256", "number"), ("int8", "number"), ("bool", "checkbox"), ("address", "text"), ("uint8[]", "text")],
)
def test_input_kind(typ, kind):
    assert input_kind(typ) == kind


def test_placeholder_arrays_win_over_element_type():
    assert placeholder("uint256[]") == "[1, 2, 3] or 1,2,3"
    assert placeholder("uint256") == "0"


def test_parse_input_value():
    assert parse_input_value("", "uint256") is None
    assert parse_input_value("42", "uint256") == 42
    assert parse_input_value("0x10", "uint256") == 16
    assert parse_input_value("-3", "int8") == -3
    assert parse_input_value("on", "bool") is True
    assert parse_input_value("no", "bool") is False
    assert parse_input_value("hello", "string") == "hello"


def test_parse_array_from_json_or_commas():
    assert parse_input_value("[1, 2, 3]", "uint256[]") == [1, 2, 3]
    assert parse_input_value("4, 5", "uint256[]") == [4, 5]
    assert parse_input_value('["true", "0"]', "bool[]") == [True, False]


def test_parse_bad_number_raises():
    with pytest.raises(InputValueError, match="Invalid number"):
        parse_input_value("ten", "uint256")


@pytest.mark.parametrize(
    "value, typ, valid",
    [
        ("", "uint256", True),
        ("", "address", False),
        ("0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0", "address", True),
        ("0x1234", "address", False),
        ("742d35Cc6634C0532925a3b844Bc9e7595f0bEb0", "address", False),
        ("255", "uint8", True),
        ("256", "uint8", False),
        ("-1", "uint256", False),
        ("-128", "int8", True),
        ("128", "int8", False),
        ("0x" + "ab" * 32, "bytes32", True),
        ("0xabcd", "bytes32", False),
        ("abcd", "bytes2", False),
        ("1,2,x", "uint256[]", False),
        ("[1, 2]", "uint256[]", True),
    ],
)
def test_validate_input(value, typ, valid):
    result = validate_input(value, Parameter(type=typ, name="arg"))

    assert result.valid is valid
    assert (result.error is None) is valid


def test_format_return_value():
    assert format_return_value(None) == "N/A"
    assert format_return_value(True) == "true"
    assert format_return_value(10**30) == str(10**30)
    assert format_return_value([1, False]) == "[1, false]"
    assert format_return_value(b"\x01\xff") == "0x01ff"
    assert format_return_value({"a": 1}) == '{\n  "a": 1\n}'
