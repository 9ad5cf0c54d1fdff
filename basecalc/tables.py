'''
Operator and constant catalogs for the expression language, along with
the names and digit characters of the bases 2 through 36.

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
from enum import Enum, IntEnum


class Op(Enum):
    '''Every kind of token the tokenizer can produce.'''
    NONE = "none"
    NUMBER = "number"
    VARIABLE = "variable"

    # Binary operators
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    MODULUS = "%"
    LOGARITHM = "$"
    ASSIGN = "="

    # Grouping
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    # Unary operators and functions
    NEGATE = "negate"
    ABS = "#abs"
    ACOS = "#acos"
    ANGLE = "#angle"
    ASIN = "#asin"
    ATAN = "#atan"
    CEIL = "#ceil"
    COS = "#cos"
    ERF = "#erf"
    FLOOR = "#floor"
    FRAC = "#frac"
    IM = "#im"
    INT = "#int"
    LN = "#ln"
    LOG = "#log"
    RE = "#re"
    ROUND = "#round"
    SIGN = "#sign"
    SIN = "#sin"
    SQRT = "#sqrt"
    TAN = "#tan"

    # Constants
    PI = "@pi"
    PHI = "@phi"
    E = "@e"
    GAMMA = "@gamma"
    RAND = "@rand"
    GRAND = "@grand"
    PREVIOUS = "&"


class Precedence(IntEnum):
    '''Operator binding strength, lowest first.'''
    ADDITION = 0
    MULTIPLICATION = 1
    EXPONENTIATION = 2
    UNARY = 3
    PARENTHESIS = 4
    ASSIGNMENT = 5


Operator = namedtuple("Operator", "spelling op operands description")
Constant = namedtuple("Constant", "spelling op description")

# Must stay in ASCII order of the spelling.
OPERATORS = (
    Operator("#abs",   Op.ABS,         1, "absolute value"),
    Operator("#acos",  Op.ACOS,        1, "inverse cosine"),
    Operator("#angle", Op.ANGLE,       1, "complex angle"),
    Operator("#asin",  Op.ASIN,        1, "inverse sine"),
    Operator("#atan",  Op.ATAN,        1, "inverse tangent"),
    Operator("#ceil",  Op.CEIL,        1, "gaussian ceiling"),
    Operator("#cos",   Op.COS,         1, "cosine"),
    Operator("#erf",   Op.ERF,         1, "error function"),
    Operator("#floor", Op.FLOOR,       1, "gaussian floor"),
    Operator("#frac",  Op.FRAC,        1, "fractional part"),
    Operator("#im",    Op.IM,          1, "imaginary"),
    Operator("#int",   Op.INT,         1, "integer part"),
    Operator("#ln",    Op.LN,          1, "natural logarithm"),
    Operator("#log",   Op.LOG,         1, "base logarithm"),
    Operator("#re",    Op.RE,          1, "real"),
    Operator("#round", Op.ROUND,       1, "gaussian rounding"),
    Operator("#sign",  Op.SIGN,        1, "sign"),
    Operator("#sin",   Op.SIN,         1, "sine"),
    Operator("#sqrt",  Op.SQRT,        1, "square root"),
    Operator("#tan",   Op.TAN,         1, "tangent"),
    Operator("$",      Op.LOGARITHM,   2, "log and base logarithm"),
    Operator("%",      Op.MODULUS,     2, "modulus"),
    Operator("(",      Op.LEFT_PAREN,  1, "left parenthesis"),
    Operator(")",      Op.RIGHT_PAREN, 1, "right parenthesis"),
    Operator("*",      Op.MULTIPLY,    2, "multiplication"),
    Operator("+",      Op.ADD,         2, "addition"),
    Operator("-",      Op.SUBTRACT,    2, "subtraction"),
    Operator("/",      Op.DIVIDE,      2, "division"),
    Operator("=",      Op.ASSIGN,      2, "assignment"),
    Operator("^",      Op.POWER,       2, "exponentiation"),
)

# Must stay in ASCII order of the spelling.
CONSTANTS = (
    Constant("&",      Op.PREVIOUS, "Previous result"),
    Constant("@e",     Op.E,        "Euler's number"),
    Constant("@gamma", Op.GAMMA,    "Euler-Mascheroni constant"),
    Constant("@grand", Op.GRAND,    "Gaussian random number"),
    Constant("@phi",   Op.PHI,      "Golden ratio"),
    Constant("@pi",    Op.PI,       "Pi"),
    Constant("@rand",  Op.RAND,     "Random number between 0 and 1"),
)

_precedence = {
    Op.ADD: Precedence.ADDITION,
    Op.SUBTRACT: Precedence.ADDITION,
    Op.MULTIPLY: Precedence.MULTIPLICATION,
    Op.DIVIDE: Precedence.MULTIPLICATION,
    Op.MODULUS: Precedence.MULTIPLICATION,
    Op.POWER: Precedence.EXPONENTIATION,
    Op.LOGARITHM: Precedence.EXPONENTIATION,
    Op.LEFT_PAREN: Precedence.PARENTHESIS,
    Op.RIGHT_PAREN: Precedence.PARENTHESIS,
    Op.ASSIGN: Precedence.ASSIGNMENT,
}
for _entry in OPERATORS:
    if _entry.operands == 1 and _entry.op not in _precedence:
        _precedence[_entry.op] = Precedence.UNARY
_precedence[Op.NEGATE] = Precedence.UNARY
del _entry

_descriptions = dict((entry.op, entry.description) for entry in OPERATORS)
_descriptions[Op.NEGATE] = "negation"

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

BASE_NAMES = {
     2: "Binary",          3: "Ternary",        4: "Quaternary",
     5: "Quinary",         6: "Senary",         7: "Septenary",
     8: "Octal",           9: "Nonary",        10: "Decimal",
    11: "Undecimal",      12: "Dozenal",       13: "Tridecimal",
    14: "Tetradecimal",   15: "Pentadecimal",  16: "Hexadecimal",
    17: "Heptadecimal",   18: "Octodecimal",   19: "Enneadecimal",
    20: "Vigesimal",      21: "Unvigesimal",   22: "Duovigesimal",
    23: "Trivigesimal",   24: "Tetravigesimal", 25: "Pentavigesimal",
    26: "Hexavigesimal",  27: "Heptavigesimal", 28: "Octovigesimal",
    29: "Enneavigesimal", 30: "Trigesimal",    31: "Untrigesimal",
    32: "Duotrigesimal",  33: "Tritrigesimal", 34: "Tetratrigesimal",
    35: "Pentatrigesimal", 36: "Hexatrigesimal",
}


def precedence(op):
    '''Return the Precedence of op.  Anything unknown binds loosest.'''
    return _precedence.get(op, Precedence.ADDITION)

def describe(op):
    return _descriptions.get(op, "unknown operator")

def spelling(op):
    'Return the text a user types for op.'
    return op.value

def base_name(base):
    return BASE_NAMES.get(base)

def base_char(base):
    '''Return the single character naming a base; base 36 has none, so
    its largest digit is used.
    '''
    if base >= len(DIGITS):
        return DIGITS[-1]
    return DIGITS[base]

def digit_char(digit):
    return DIGITS[digit]

def char_digit(c):
    '''Return the value of the digit character c (0-9, A-Z in either
    case) or None if c is not a digit character.
    '''
    if len(c) != 1 or not c.isascii() or not c.isalnum():
        return None
    return DIGITS.index(c.upper())

def _longest_match(catalog, line, index):
    text = line[index:].lower()
    found = None
    for entry in catalog:
        if text.startswith(entry.spelling):
            if found is None or len(entry.spelling) > len(found.spelling):
                found = entry
    return found

def match_operator(line, index):
    '''Return the Operator entry whose spelling is the longest
    case-insensitive prefix of line[index:], or None.
    '''
    return _longest_match(OPERATORS, line, index)

def match_constant(line, index):
    'Same as match_operator() for the constant catalog.'
    return _longest_match(CONSTANTS, line, index)
