'''
Fixtures shared by the basecalc tests.
'''

import random

import pytest

from basecalc.calculator import calculate
from basecalc.context import Context
from basecalc.evaluator import EvaluationError
from basecalc.mpformat import format_result
from basecalc.number import ParseError


class Session(object):
    '''Calls return the text a line produces:  the formatted result, the
    command's message, or the error message.
    '''
    def __init__(self, context):
        self.context = context

    def __call__(self, line):
        try:
            return format_result(calculate(line, self.context), self.context)
        except (ParseError, EvaluationError) as e:
            return str(e)


@pytest.fixture
def context():
    return Context(rng=random.Random(1234))


@pytest.fixture
def session(context):
    return Session(context)


@pytest.fixture
def dozenal(session):
    '''A session in base 12 showing 24 (20 in dozenal) digits.'''
    assert session(":baSE C") == "Base set to Dozenal (C)."
    assert session(":DIGits    \t__\t\t2  0") == "Precision set to 20 digits."
    return session
