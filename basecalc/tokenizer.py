'''
Turn a line of input into a list of Tokens.

The tokenizer alternates between wanting a value (a number, constant or
variable, possibly preceded by prefix functions and negations) and
wanting a binary operator.  A ':' at the start of a line hands the line
to the command processor instead.

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

from basecalc.commands import run_command
from basecalc.debug import trace
from basecalc.number import SEPARATORS, ParseError, Token, parse_number
from basecalc.tables import Op, match_constant, match_operator


def _is_name_char(c):
    return (c.isascii() and c.isalnum()) or c == "_"

def parse_operator(line, index):
    '''Return (token, next index) for the operator at line[index].  If
    nothing matches, the token's op is Op.NONE and the index is unchanged.
    '''
    if line.startswith("=", index):
        return Token(Op.ASSIGN, 2), index + 1
    entry = match_operator(line, index)
    if entry is None:
        return Token(), index
    return Token(entry.op, entry.operands), index + len(entry.spelling)

def parse_constant(line, index, context):
    '''Recognize a named constant, '&' or a variable reference at
    line[index].  Returns (token, next index) or None if line[index]
    doesn't start one.

    A name that isn't defined yet is allocated (with the value 0) only
    when an '=' follows it, so that it can be assigned to.
    '''
    entry = match_constant(line, index)
    if entry is not None:
        return Token(entry.op), index + len(entry.spelling)
    if not line.startswith("@", index):
        return None
    end = index + 1
    while end < len(line) and _is_name_char(line[end]):
        end += 1
    name = line[index + 1:end]
    if not name:
        raise ParseError("Invalid variable name!", index)
    var_index = context.find_variable(name)
    if var_index is None:
        rest = line[end:].lstrip(SEPARATORS)
        if not rest.startswith("="):
            raise ParseError("Undefined variable '%s'!" % name, index)
        var_index = context.add_variable(name)
        trace(context, "Allocated variable @%s", name)
    return Token(Op.VARIABLE, var_index=var_index), end

def tokenize(line, context):
    '''Return the list of Tokens in line.  Raises ParseError when the line
    is malformed, and CommandMessage when it was a command.
    '''
    tokens = []
    index = 0
    paren_count = 0
    start = True
    expect_number = True
    follows_number = False
    while index < len(line):
        c = line[index]
        if c in SEPARATORS:
            index += 1
            continue
        if start and c == ":":
            run_command(line, index + 1, context)
        if c == "(":
            if follows_number:
                raise ParseError("Expected operator!", index)
            tokens.append(Token(Op.LEFT_PAREN, 1))
            paren_count += 1
            index += 1
            continue
        if c == ")":
            if paren_count == 0:
                raise ParseError("Mismatched parentheses!", index)
            if not follows_number:
                raise ParseError("Expected number!", index)
            tokens.append(Token(Op.RIGHT_PAREN, 1))
            paren_count -= 1
            index += 1
            continue
        start = False
        if expect_number:
            found = parse_constant(line, index, context)
            if found is None:
                try:
                    found = parse_number(line, context.base, index)
                except ParseError:
                    # Not a value: it may be a prefix function or a negation
                    token, new_index = parse_operator(line, index)
                    if token.op is Op.NONE or token.operands == 2:
                        if token.op is not Op.SUBTRACT:
                            raise
                        token = Token(Op.NEGATE, 1)
                    tokens.append(token)
                    index = new_index
                    continue
            token, index = found
            tokens.append(token)
            expect_number = False
            follows_number = True
        else:
            token, new_index = parse_operator(line, index)
            if token.op is Op.NONE:
                raise ParseError("Invalid operator!", new_index)
            if token.operands == 1 and follows_number:
                raise ParseError("Expected operator!", index)
            tokens.append(token)
            index = new_index
            expect_number = True
            follows_number = False
    if paren_count:
        raise ParseError("Mismatched parentheses!", len(line))
    if not tokens:
        raise ParseError("Empty expression", 0)
    last = tokens[-1]
    if last.operands > 0 and last.op is not Op.RIGHT_PAREN:
        raise ParseError("Incomplete expression!", len(line))
    trace(context, "Tokens: %s", " ".join([str(t) for t in tokens]))
    return tokens
