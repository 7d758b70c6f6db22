from __future__ import annotations

import textwrap

import pytest

from flowlang import parse_flow, try_parse_flow
from flowlang.ast import (
    BinaryExpression,
    BinaryOperator,
    Identifier,
    IfStatement,
    Program,
    SetStatement,
    ShowStatement,
    StringLiteral,
    TimeLiteral,
    WhenStatement,
)
from flowlang.errors import ParseError


def test_parse_when_if_else_program() -> None:
    source = textwrap.dedent(
        """
        when user logs in
          if time is after 22:00
            show "Good evening"
          else
            show "Hello"
        """
    )

    program = parse_flow(source)

    assert isinstance(program, Program)
    assert program.type == "Program"
    assert program.body[0].type == "When"

    when = program.body[0]
    assert isinstance(when, WhenStatement)
    assert when.event_name == "user logs in"
    assert len(when.body) == 1

    branch = when.body[0]
    assert isinstance(branch, IfStatement)
    assert branch.test == BinaryExpression(
        op=BinaryOperator.AFTER,
        left=Identifier("time"),
        right=TimeLiteral("22:00"),
    )
    assert branch.then_body == (ShowStatement(StringLiteral("Good evening")),)
    assert branch.else_body == (ShowStatement(StringLiteral("Hello")),)


def test_parse_set_and_show_identifier() -> None:
    source = textwrap.dedent(
        """
        when app starts
          set greeting to "Hi"
          show greeting
        """
    )

    when = parse_flow(source).body[0]

    assert when.body[0] == SetStatement(name="greeting", value=StringLiteral("Hi"))
    assert when.body[1] == ShowStatement(Identifier("greeting"))


def test_if_without_else_has_no_else_body() -> None:
    source = textwrap.dedent(
        """
        if score > 10
          show "high"
        show "done"
        """
    )

    program = parse_flow(source)

    assert len(program.body) == 2
    assert program.body[0].else_body is None
    assert program.body[1] == ShowStatement(StringLiteral("done"))


def test_keywords_are_case_insensitive() -> None:
    source = textwrap.dedent(
        """
        WHEN Door Opens
          IF open IS true
            SHOW "open"
          ELSE
            Set state To "closed"
        """
    )

    when = parse_flow(source).body[0]

    assert when.event_name == "Door Opens"
    branch = when.body[0]
    assert branch.test.op is BinaryOperator.IS
    assert branch.else_body == (SetStatement(name="state", value=StringLiteral("closed")),)


def test_nested_blocks_return_to_outer_level() -> None:
    source = textwrap.dedent(
        """
        when a
          if x is 1
            if y is 2
              show "deep"
          show "middle"
        show "top"
        """
    )

    program = parse_flow(source)

    assert [stmt.type for stmt in program.body] == ["When", "Show"]
    when = program.body[0]
    assert [stmt.type for stmt in when.body] == ["If", "Show"]
    assert when.body[0].then_body[0].type == "If"


def test_else_belongs_to_if_at_same_indent() -> None:
    source = textwrap.dedent(
        """
        if a is 1
          if b is 2
            show "inner"
        else
          show "outer else"
        """
    )

    outer = parse_flow(source).body[0]

    assert outer.else_body == (ShowStatement(StringLiteral("outer else")),)
    assert outer.then_body[0].else_body is None


def test_comments_and_blank_lines_do_not_affect_structure() -> None:
    source = textwrap.dedent(
        """
        # greeting rules
        when app starts

          # say hi
          show "Hi"
        """
    )

    when = parse_flow(source).body[0]

    assert when.body == (ShowStatement(StringLiteral("Hi")),)


def test_event_name_is_free_form() -> None:
    program = parse_flow('when the clock strikes 12:00!\n  show "bong"\n')

    assert program.body[0].event_name == "the clock strikes 12:00!"


def test_empty_source_parses_to_empty_program() -> None:
    assert parse_flow("") == Program(body=())
    assert parse_flow("# only a comment\n\n") == Program(body=())


def test_parse_is_deterministic() -> None:
    source = textwrap.dedent(
        """
        when app starts
          set n to 5
          if n > 3
            show "big"
          else
            show "small"
        route trip
          from "A"
          to "B"
          avoid tolls
        """
    )

    assert parse_flow(source) == parse_flow(source)


def test_unknown_statement_is_rejected() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow("when x\n  print \"hi\"\n")

    assert excinfo.value.line == 2
    assert 'Unknown statement: "print "hi""' in excinfo.value.message


def test_unknown_statement_suggests_keyword() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow('shwo "hi"\n')

    assert excinfo.value.suggestion == "Did you mean 'show'?"


def test_keyword_without_argument_is_unknown_statement() -> None:
    with pytest.raises(ParseError, match="Unknown statement"):
        parse_flow("show\n")


def test_stray_else_is_unknown_statement() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow('show "a"\nelse\n  show "b"\n')

    assert excinfo.value.line == 2
    assert "Unknown statement" in excinfo.value.message


def test_invalid_set_syntax() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow('set 1x to "a"\n')

    assert excinfo.value.line == 1
    assert excinfo.value.message == "Invalid set syntax. Use: set <name> to <value>"


def test_set_requires_to_keyword() -> None:
    with pytest.raises(ParseError, match="Invalid set syntax"):
        parse_flow('set greeting "Hi"\n')


def test_error_message_carries_line_number() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_flow('\n\nshow "ok"\nshow @@\n')

    assert excinfo.value.line == 4
    assert str(excinfo.value).startswith("Line 4 | [PARSE_ERROR]")


def test_try_parse_flow_returns_program() -> None:
    outcome = try_parse_flow('show "Hi"\n')

    assert outcome.ok
    assert outcome.error is None
    assert outcome.program == Program(body=(ShowStatement(StringLiteral("Hi")),))


def test_try_parse_flow_returns_error() -> None:
    outcome = try_parse_flow("frobnicate\n")

    assert not outcome.ok
    assert outcome.program is None
    assert isinstance(outcome.error, ParseError)
    assert outcome.error.line == 1


def test_ast_nodes_are_immutable() -> None:
    program = parse_flow('show "Hi"\n')

    with pytest.raises(AttributeError):
        program.body[0].value = StringLiteral("changed")
