'''
Saving and restoring the calculator's settings and history between
sessions.

The state is written as a Python dictionary literal, e.g.

    {
      "base" : 12,
      "debug" : False,
      "digits" : 20,
      "history" : ['1+2', ':base C'],
      "radians" : True,
    }

and read back with ast.literal_eval, so a state file can be edited by
hand but is never executed.

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

import ast
import os

from basecalc.context import Context

nl = "\n"
STATE_FILE = "state"


class StateError(Exception): pass


def state_dir():
    '''Return the directory holding the state file:  $BASECALC_HOME if
    it is set, otherwise ~/.basecalc.
    '''
    home = os.environ.get("BASECALC_HOME")
    if home:
        return home
    return os.path.join(os.path.expanduser("~"), ".basecalc")

def state_path():
    return os.path.join(state_dir(), STATE_FILE)

def WriteDictionary(filename, dictionary):
    '''Write dictionary to filename as a literal with one key per line,
    keys sorted.
    '''
    with open(filename, "w") as f:
        p = f.write
        p("{" + nl)
        indent = "  "
        for key in sorted(dictionary):
            p(indent + '"' + key + '"' + " : " + repr(dictionary[key]) + "," + nl)
        p("}" + nl)

def ReadDictionary(filename):
    with open(filename) as f:
        d = ast.literal_eval(f.read())
    if not isinstance(d, dict):
        raise StateError("%s does not hold a dictionary" % filename)
    return d

def _check(d, key, kind, valid=lambda x: True):
    value = d[key]
    # bool is a subclass of int; don't let True pass as a base
    if type(value) is not kind or not valid(value):
        raise StateError("Bad value for %s: %r" % (key, value))
    return value

def save_state(context, filename=None):
    '''Write the persistent fields of context.  The state directory is
    created if needed.
    '''
    if filename is None:
        filename = state_path()
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    WriteDictionary(filename, {
        "base": context.base,
        "digits": context.digits,
        "radians": context.radians,
        "debug": context.debug,
        "history": list(context.history),
    })

def load_state(filename=None, rng=None):
    '''Return a Context built from a saved state.  Raises IOError if the
    file can't be read, or StateError (or the SyntaxError or ValueError
    from ast.literal_eval) if its contents are not a valid state.
    '''
    if filename is None:
        filename = state_path()
    try:
        d = ReadDictionary(filename)
        context = Context(
            base=_check(d, "base", int, lambda b: 2 <= b <= 36),
            digits=_check(d, "digits", int, lambda n: n > 0),
            radians=_check(d, "radians", bool),
            debug=_check(d, "debug", bool),
            rng=rng)
        history = _check(d, "history", list)
    except KeyError as e:
        raise StateError("%s is missing %s" % (filename, e))
    for line in history:
        if not isinstance(line, str):
            raise StateError("Bad history line: %r" % (line,))
    context.history = history
    return context
