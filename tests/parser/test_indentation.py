from __future__ import annotations

import pytest

from flowlang import parse_flow
from flowlang.errors import IndentationParseError, ParseError


def _indented(header: str, child_indent: int) -> str:
    return f"{header}\n{' ' * child_indent}show \"x\"\n"


@pytest.mark.parametrize("header", ["when app starts", "if a is b"])
@pytest.mark.parametrize("child_indent", [1, 3, 4, 6])
def test_wrong_child_indent_cites_child_line(header: str, child_indent: int) -> None:
    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow(_indented(header, child_indent))

    error = excinfo.value
    assert error.line == 2
    assert error.expected_indent == 2
    assert error.found_indent == child_indent
    assert "Expected 2 spaces" in error.message


def test_wrong_indent_under_nested_compound() -> None:
    source = "when x\n  if a is b\n     show 1\n"

    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow(source)

    assert excinfo.value.line == 3
    assert excinfo.value.expected_indent == 4


@pytest.mark.parametrize("header", ["when app starts", "if a is b", "route trip"])
def test_missing_block_cites_header_line(header: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow(f"{header}\nshow \"next\"\n")

    assert excinfo.value.line == 1
    keyword = header.split()[0]
    assert excinfo.value.message == f'Expected an indented block after "{keyword}"'


def test_compound_at_end_of_input_needs_block() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow("when app starts\n")

    assert excinfo.value.line == 1


def test_else_without_block() -> None:
    source = 'if a is b\n  show 1\nelse\nshow 2\n'

    with pytest.raises(ParseError) as excinfo:
        parse_flow(source)

    assert excinfo.value.line == 3
    assert excinfo.value.message == 'Expected an indented block after "else"'


def test_else_with_wrong_indent() -> None:
    source = 'if a is b\n  show 1\nelse\n    show 2\n'

    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow(source)

    assert excinfo.value.line == 4


def test_indented_first_line_is_rejected() -> None:
    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow('  show "x"\n')

    assert excinfo.value.line == 1
    assert excinfo.value.message == "Unexpected indentation. Expected indent 0 but got 2."


def test_sibling_indented_deeper_is_rejected() -> None:
    source = 'when x\n  show 1\n    show 2\n'

    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow(source)

    assert excinfo.value.line == 3
    assert excinfo.value.expected_indent == 2
    assert excinfo.value.found_indent == 4


def test_simple_statement_cannot_open_block() -> None:
    with pytest.raises(IndentationParseError) as excinfo:
        parse_flow('show "a"\n  show "b"\n')

    assert excinfo.value.line == 2


def test_indentation_error_is_a_parse_error() -> None:
    assert issubclass(IndentationParseError, ParseError)
    error = IndentationParseError("bad", line=3, expected_indent=2, found_indent=3)
    assert "Expected indentation: 2 spaces" in str(error)
    assert "Found indentation: 3 spaces" in str(error)
