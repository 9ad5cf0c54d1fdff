'''
Tokenizer tests
'''

import pytest
from pytest import raises

from basecalc.context import Context
from basecalc.number import CommandMessage, ParseError
from basecalc.tables import Op
from basecalc.tokenizer import parse_constant, parse_operator, tokenize


def ops(line, context):
    return [token.op for token in tokenize(line, context)]


def test_parse_operator():
    token, index = parse_operator("1+#sqrt4", 2)
    assert token.op is Op.SQRT
    assert token.operands == 1
    assert index == 7
    token, index = parse_operator("= 5", 0)
    assert token.op is Op.ASSIGN
    assert token.operands == 2
    assert index == 1
    token, index = parse_operator("?", 0)
    assert token.op is Op.NONE
    assert index == 0


def test_parse_constant(context):
    token, index = parse_constant("@Pi*2", 0, context)
    assert token.op is Op.PI
    assert index == 3
    assert parse_constant("12", 0, context) is None


def test_variables(context):
    with raises(ParseError) as e:
        parse_constant("@speed*2", 0, context)
    assert e.value.message == "Undefined variable 'speed'!"
    assert e.value.offset == 0
    token, index = parse_constant("@speed = 2", 0, context)
    assert token.op is Op.VARIABLE
    assert token.var_index == 0
    assert index == 6
    assert context.variables[0].name == "speed"
    # Defined now, so it can be read
    token, index = parse_constant("@speed*2", 0, context)
    assert token.var_index == 0
    with raises(ParseError) as e:
        parse_constant("@ = 2", 0, context)
    assert e.value.message == "Invalid variable name!"


def test_simple(context):
    assert ops("1+2*3", context) == [Op.NUMBER, Op.ADD, Op.NUMBER,
                                     Op.MULTIPLY, Op.NUMBER]


def test_negation(context):
    assert ops("--1", context) == [Op.NUMBER]
    assert ops("-#sin1", context) == [Op.NEGATE, Op.SIN, Op.NUMBER]
    assert ops("-(1)", context) == [Op.NEGATE, Op.LEFT_PAREN, Op.NUMBER,
                                    Op.RIGHT_PAREN]
    assert ops("1---@pi", context) == [Op.NUMBER, Op.SUBTRACT, Op.NEGATE,
                                       Op.NEGATE, Op.PI]


def test_case_insensitive(context):
    assert ops("#SqRt@PI", context) == [Op.SQRT, Op.PI]


def test_number_values(context):
    tokens = tokenize("[1, -2.5] + 3", context)
    assert tokens[0].real_integer == [1]
    assert tokens[0].imaginary_integer == [2]
    assert tokens[0].imaginary_fraction == [5]
    assert tokens[0].sign == [False, True]
    assert tokens[2].real_integer == [3]


def test_separators_inside_numbers(context):
    tokens = tokenize("1 000_000 + 1", context)
    assert tokens[0].real_integer == [1, 0, 0, 0, 0, 0, 0]


@pytest.mark.parametrize("line, message, offset", [
    ("1+*2", "Invalid number!", 2),
    ("(1+2", "Mismatched parentheses!", 4),
    ("(1+2))", "Mismatched parentheses!", 5),
    ("1 2 3 +", "Incomplete expression!", 7),
    ("@pi@e", "Invalid operator!", 3),
    ("1 ? 2", "Invalid operator!", 2),
    ("()", "Expected number!", 1),
    ("#sin", "Incomplete expression!", 4),
    ("3#sin2", "Expected operator!", 1),
    ("3(", "Expected operator!", 1),
    ("", "Empty expression", 0),
    ("   ", "Empty expression", 0),
    ("#funky(1)", "Invalid number!", 0),
])
def test_errors(context, line, message, offset):
    with raises(ParseError) as e:
        tokenize(line, context)
    assert e.value.message == message
    assert e.value.offset == offset


def test_digit_offset():
    context = Context(base=12)
    with raises(ParseError) as e:
        tokenize("12345 678 9abcdef", context)
    assert e.value.message == "Digit out of dozenal (C) range!"
    assert e.value.offset == 13


def test_command_only_at_start(context):
    with raises(CommandMessage):
        tokenize("  :radians", context)
    with raises(ParseError) as e:
        tokenize("1:radians", context)
    assert e.value.message == "Invalid operator!"


def test_trace(capsys):
    context = Context(debug=True)
    tokenize("1+2", context)
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "+:2" in out
