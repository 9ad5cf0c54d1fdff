'''
Tokens and the number literal scanner.

A number literal is a run of digits in the current base with an optional
radix point, e.g. "12.5", or a complex literal "[re, im]".  A '-' is
allowed in front of either component; each one toggles its sign.  Spaces,
tabs and underscores may appear anywhere and are ignored.

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

import sys

from basecalc.stack import CalcException
from basecalc.tables import Op, base_char, base_name, char_digit, digit_char

SEPARATORS = " _\t"

REAL, IMAGINARY = 0, 1


class ParseError(CalcException):
    '''A line could not be tokenized.  offset is the character index the
    message refers to.
    '''
    def __init__(self, message, offset=0):
        CalcException.__init__(self, message)
        self.message = message
        self.offset = offset

    @property
    def positional(self):
        return self.offset != NOT_POSITIONAL


# Offset used by messages that don't point into the line
NOT_POSITIONAL = sys.maxsize


class CommandMessage(ParseError):
    '''Raised by a successful command to hand its confirmation text back
    to the caller.  It is not an error.
    '''
    def __init__(self, message):
        ParseError.__init__(self, message, NOT_POSITIONAL)


class Token(object):
    '''One lexical item.  Number tokens carry their digit values; the
    other kinds only need op, operands and (for variables) var_index.
    '''
    def __init__(self, op=Op.NONE, operands=0, var_index=None):
        self.op = op
        self.operands = operands
        self.real_integer = []
        self.real_fraction = []
        self.imaginary_integer = []
        self.imaginary_fraction = []
        self.sign = [False, False]
        self.var_index = var_index

    def is_number(self):
        return self.op is Op.NUMBER

    def has_real(self):
        return bool(self.real_integer or self.real_fraction)

    def has_imaginary(self):
        return bool(self.imaginary_integer or self.imaginary_fraction)

    def digits(self, part, integer):
        'Return the digit list a scanned digit belongs in.'
        if part == IMAGINARY:
            return self.imaginary_integer if integer else self.imaginary_fraction
        return self.real_integer if integer else self.real_fraction

    def _component(self, part):
        sign = "-" if self.sign[part] else "+"
        integer = "".join([digit_char(d) for d in self.digits(part, True)])
        fraction = "".join([digit_char(d) for d in self.digits(part, False)])
        return "%s%s.%s" % (sign, integer, fraction)

    def __str__(self):
        if self.is_number():
            return "[%s , %s]" % (self._component(REAL),
                                  self._component(IMAGINARY))
        if self.op is Op.VARIABLE:
            return "var:%s" % self.var_index
        return "%s:%d" % (self.op.value, self.operands)

    def __repr__(self):
        return "Token(%s)" % str(self)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.__dict__ == other.__dict__


def digit_range_message(base):
    name = base_name(base).lower()
    if base >= 36:
        return "Digit out of %s (Z+1) range!" % name
    return "Digit out of %s (%s) range!" % (name, base_char(base))

def parse_number(line, base, index):
    '''Scan a number literal starting at line[index] and return the tuple
    (token, index just past the literal).  Raises ParseError on any
    malformed literal.
    '''
    token = Token(Op.NUMBER)
    complex_ = False
    part = REAL
    integer = True
    expect_sign = True
    while index < len(line) and line[index] in SEPARATORS:
        index += 1
    if index >= len(line):
        raise ParseError("Incomplete expression!", index)
    while index < len(line):
        c = line[index]
        if c in SEPARATORS:
            index += 1
            continue
        if c == "[":
            if token.has_real() or complex_:
                raise ParseError("Unexpected '['!", index)
            complex_ = True
            expect_sign = True
        elif c == "-" and expect_sign:
            token.sign[part] = not token.sign[part]
        elif c == ",":
            if not complex_ or part == IMAGINARY:
                raise ParseError("Unexpected ','!", index)
            part = IMAGINARY
            integer = True
            expect_sign = True
        elif c == "]":
            if not complex_:
                raise ParseError("Unexpected ']'!", index)
            if not token.has_real():
                raise ParseError("Missing real component!", index)
            if not token.has_imaginary():
                raise ParseError("Missing imaginary component!", index)
            return token, index + 1
        elif c == ".":
            if not integer:
                raise ParseError("Multiple decimals in number!", index)
            integer = False
        else:
            digit = char_digit(c)
            if digit is None:
                # End of the literal
                if not (token.has_real() or token.has_imaginary()):
                    raise ParseError("Invalid number!", index)
                return token, index
            if digit >= base:
                raise ParseError(digit_range_message(base), index)
            token.digits(part, integer).append(digit)
            expect_sign = False
        index += 1
    if complex_:
        raise ParseError("Unclosed complex number!", index)
    if not token.has_real():
        raise ParseError("Invalid number!", index)
    return token, index
