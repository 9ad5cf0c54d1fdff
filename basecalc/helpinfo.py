'''
Help text shown by the :help command.

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

from basecalc.tables import CONSTANTS, OPERATORS, Op

introduction = '''Enter an expression to evaluate it, or a command starting with ':'.
Numbers are written in the current base with digits 0-9 and A-Z; complex
numbers are written [real, imaginary].  Spaces, tabs and underscores are
ignored.  Assign to a variable with @name = expression.'''

helpinfo = {
":base"    : '''Set the number base; the value is one digit, 0 meaning 36 (Z+1).''',
":digits"  : '''Set the number of digits shown; the value is read in the current base.''',
":degrees" : '''Measure angles in degrees.''',
":radians" : '''Measure angles in radians.''',
":dms"     : '''Show the previous result in dozenal using digit names.''',
":debug"   : '''Toggle printing of the tokens and the evaluation steps.''',
":help"    : '''Show this help.''',
}

# Constants that are drawn afresh each time they're used
random_constants = (Op.RAND, Op.GRAND)


def help_text(value_of):
    '''Return the help text.  value_of(op) must return the display
    string of the constant op.
    '''
    lines = [introduction, "", "Commands:"]
    for name in sorted(helpinfo):
        lines.append("  %-10s %s" % (name, helpinfo[name]))
    lines.append("")
    lines.append("Operators:")
    for entry in OPERATORS:
        lines.append("  %-10s %s" % (entry.spelling, entry.description))
    lines.append("")
    lines.append("Constants:")
    for entry in CONSTANTS:
        if entry.op in random_constants:
            lines.append("  %-10s %s" % (entry.spelling, entry.description))
        else:
            lines.append("  %-10s %s:%s" % (entry.spelling, entry.description,
                                            value_of(entry.op)))
    return "\n".join(lines)
