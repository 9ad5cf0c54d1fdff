'''
Commands are lines starting with ':'.  Command names are matched without
regard to case, e.g. ":BaSe C", and the argument may follow the name
directly, e.g. ":base0".

A command that succeeds raises CommandMessage with its confirmation text;
one that fails raises ParseError.  Either way the line produces no value.

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

from basecalc.debug import debug
from basecalc.helpinfo import help_text
from basecalc.mpformat import format_dms, format_int, format_number
from basecalc.number import SEPARATORS, CommandMessage, ParseError, parse_number
from basecalc.numeric import Engine
from basecalc.tables import base_char, base_name, char_digit


def _skip(line, index):
    while index < len(line) and line[index] in SEPARATORS:
        index += 1
    return index

def _check_end(line, index, message):
    'Raise ParseError(message) if anything but separators follows index.'
    index = _skip(line, index)
    if index < len(line):
        raise ParseError(message, index)

def _describe_base(base):
    if base >= 36:
        return "%s (Z+1)" % base_name(base)
    return "%s (%s)" % (base_name(base), base_char(base))

def set_base(line, index, context):
    index = _skip(line, index)
    if index >= len(line):
        raise ParseError("Missing base value!", index)
    base = char_digit(line[index])
    if base is None:
        raise ParseError("Invalid base value!", index)
    if base == 1:
        raise ParseError("Base must be between 2 and 36!\n"
                         "Use ':base 0' for base 36 (Z+1)", index)
    if base == 0:
        base = 36
    _check_end(line, index + 1, "Invalid characters after base value!")
    context.set_base(base)
    raise CommandMessage("Base set to %s." % _describe_base(base))

def set_digits(line, index, context):
    token, end = parse_number(line, context.base, index)
    if (token.real_fraction or token.has_imaginary() or token.sign[0] or
            not any(token.real_integer)):
        raise ParseError("Precision must be a positive real integer!", index)
    digits = 0
    for digit in token.real_integer:
        digits = digits*context.base + digit
    _check_end(line, end, "Invalid characters after digits value!")
    context.set_digits(digits)
    raise CommandMessage("Precision set to %s digits." %
                         format_int(digits, context.base))

def set_degrees(line, index, context):
    _check_end(line, index, "Invalid characters after command!")
    context.radians = False
    raise CommandMessage("Angle units set to degrees.")

def set_radians(line, index, context):
    _check_end(line, index, "Invalid characters after command!")
    context.radians = True
    raise CommandMessage("Angle units set to radians.")

def toggle_debug(line, index, context):
    _check_end(line, index, "Invalid characters after command!")
    if debug(context, not debug(context)):
        raise CommandMessage("Debug enabled")
    raise CommandMessage("Debug disabled")

def show_dms(line, index, context):
    _check_end(line, index, "Invalid characters after command!")
    raise CommandMessage(format_dms(context.prev_result, context))

def show_help(line, index, context):
    _check_end(line, index, "Invalid characters after command!")
    engine = Engine(context)
    value_of = lambda op: format_number(engine.constants[op](), context)
    raise CommandMessage(help_text(value_of))

# Command name and handler.  The handler gets the index just past the
# command name.
commands = (
    ("base",    set_base),
    ("debug",   toggle_debug),
    ("degrees", set_degrees),
    ("digits",  set_digits),
    ("dms",     show_dms),
    ("help",    show_help),
    ("radians", set_radians),
)

def run_command(line, index, context):
    '''Execute the command in line[index:] (index is just past the ':').
    Never returns:  raises CommandMessage on success, ParseError on
    failure.
    '''
    text = line[index:].lower()
    for name, handler in commands:
        if text.startswith(name):
            handler(line, index + len(name), context)
    raise ParseError("Unknown command!", index)
