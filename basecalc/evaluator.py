'''
Evaluate a list of Tokens with operator precedence.

Values go on a Stack and operators on a list used as a stack.  Prefix
functions and negations bind to the value that follows them, unless a
parenthesized expression follows, in which case they're applied when the
closing parenthesis is reached.

---------------------------------------------------------------------------
Copyright (c) 2009, Don Peterson
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are
met:

* Redistributions of source code must retain the above copyright
  notice, this list of conditions and the following disclaimer.
* Redistributions in binary form must reproduce the above
  copyright notice, this list of conditions and the following
  disclaimer in the documentation and/or other materials provided
  with the distribution.
* Neither the name of the <ORGANIZATION> nor the names of its
  contributors may be used to endorse or promote products derived
  from this software without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
"AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
(INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
'''

from collections import namedtuple

from basecalc.debug import trace
from basecalc.mpformat import format_number
from basecalc.numeric import Engine
from basecalc.stack import CalcException, NotEnoughArguments, Stack
from basecalc.tables import Op, Precedence, describe, precedence, spelling


class EvaluationError(CalcException): pass


# assignment is the index of the variable assigned to, or None
Result = namedtuple("Result", "value assignment")


def apply(engine, op, stack):
    '''Apply op to the values on top of stack.'''
    try:
        if op in engine.binary_functions:
            stack.binary(engine.binary_functions[op])
        elif op in engine.unary_functions:
            stack.unary(engine.unary_functions[op])
        else:
            raise EvaluationError("Unknown operator: %s" % spelling(op))
    except NotEnoughArguments:
        raise EvaluationError("Not enough operands for %s!" % describe(op))

def reduce_tokens(tokens, engine):
    '''Evaluate a token list holding no assignment and return its value.
    '''
    context = engine.context
    output = Stack()
    operators = []
    for token in tokens:
        if token.operands == 0:
            value = engine.value(token)
            while operators and precedence(operators[-1]) == Precedence.UNARY:
                value = engine.unary_functions[operators.pop()](value)
            output.push(value)
        elif token.op is Op.LEFT_PAREN:
            operators.append(token.op)
        elif token.op is Op.RIGHT_PAREN:
            while operators:
                op = operators.pop()
                if op is Op.LEFT_PAREN:
                    break
                apply(engine, op, output)
            # A function applied to a parenthesized argument
            if operators and precedence(operators[-1]) == Precedence.UNARY:
                apply(engine, operators.pop(), output)
        elif token.operands == 1:
            operators.append(token.op)
        else:
            while operators:
                top = operators[-1]
                if top is Op.LEFT_PAREN or precedence(top) < precedence(token.op):
                    break
                apply(engine, operators.pop(), output)
            operators.append(token.op)
        if context.debug:
            trace(context, "%s  operators: %s  output:\n%s", token,
                  " ".join([spelling(op) for op in operators]),
                  output._string(lambda x: format_number(x, context)))
    while operators:
        op = operators.pop()
        if op is Op.LEFT_PAREN:
            raise EvaluationError("Mismatched parentheses")
        apply(engine, op, output)
    if output.size() != 1:
        raise EvaluationError("Invalid expression")
    return output.pop()

def evaluate(tokens, context):
    '''Evaluate the tokens from tokenize() and return a Result.

    A line of the form "@name = expression" assigns the value of the
    expression to the variable and reports the variable's index in the
    result.
    '''
    engine = Engine(context)
    if (len(tokens) > 2 and tokens[0].op is Op.VARIABLE and
            tokens[1].op is Op.ASSIGN):
        var_index = tokens[0].var_index
        value = reduce_tokens(tokens[2:], engine)
        context.variables[var_index].value = value
        trace(context, "@%s = %s", context.variables[var_index].name,
              format_number(value, context))
        return Result(value, var_index)
    return Result(reduce_tokens(tokens, engine), None)
