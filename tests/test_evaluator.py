'''
Evaluator tests:  precedence, assignment and the errors a malformed token
list produces.
'''

import pytest
from pytest import raises

from basecalc.evaluator import EvaluationError, evaluate
from basecalc.number import ParseError, Token, parse_number
from basecalc.tables import Op
from basecalc.tokenizer import tokenize


def number(text, base=10):
    return parse_number(text, base, 0)[0]

def value(line, context):
    return evaluate(tokenize(line, context), context).value


@pytest.mark.parametrize("line, expected", [
    ("1+2*3", 7),
    ("(1+2)*3", 9),
    ("10-4-3", 3),
    ("2^3^2", 64),
    ("2^(3^2)", 512),
    ("-2^2", 4),
    ("2*-3", -6),
    ("#sqrt9*2", 6),
    ("#sqrt(4+5)", 3),
    ("#abs-#abs-3", 3),
    ("2^-1", 0.5),
    ("7 % 4 * 2", 6),
])
def test_values(context, line, expected):
    assert value(line, context) == expected


def test_assignment(context):
    result = evaluate(tokenize("@x = 2+3", context), context)
    assert result.value == 5
    assert result.assignment == 0
    assert context.variables[0].value == 5
    assert value("@x*@x", context) == 25
    result = evaluate(tokenize("@x = @x+1", context), context)
    assert result.assignment == 0
    assert context.variables[0].value == 6


def test_variable_kept_after_failed_line(context):
    with raises(ParseError):
        evaluate(tokenize("@y = 1+", context), context)
    assert context.find_variable("y") == 0
    assert value("@y", context) == 0


def test_assignment_needs_variable(context):
    with raises(EvaluationError) as e:
        evaluate(tokenize("1+2=3", context), context)
    assert str(e.value) == "Unknown operator: ="


def test_not_enough_operands(context):
    with raises(EvaluationError) as e:
        evaluate([number("5"), Token(Op.ADD, 2)], context)
    assert str(e.value) == "Not enough operands for addition!"
    with raises(EvaluationError) as e:
        evaluate([Token(Op.NEGATE, 1)], context)
    assert str(e.value) == "Not enough operands for negation!"


def test_mismatched_parentheses(context):
    with raises(EvaluationError) as e:
        evaluate([Token(Op.LEFT_PAREN, 1), number("5")], context)
    assert str(e.value) == "Mismatched parentheses"


def test_invalid_expression(context):
    with raises(EvaluationError) as e:
        evaluate([number("5"), number("6")], context)
    assert str(e.value) == "Invalid expression"


def test_trace(capsys, context):
    context.debug = True
    value("1+2", context)
    out = capsys.readouterr().out
    assert "operators: +" in out
