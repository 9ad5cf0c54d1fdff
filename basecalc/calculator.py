'''
The interactive calculator and the basecalc command.

Each line read is tokenized and evaluated against the session's Context
and the result printed in the current base.  Errors that point into the
line are shown with a caret under the offending character.

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
import traceback
import warnings
from optparse import OptionParser

try:
    import readline
except ImportError:     # Not available on every platform
    readline = None

from basecalc import __version__
from basecalc.context import Context
from basecalc.display import Display
from basecalc.evaluator import EvaluationError, evaluate
from basecalc.mpformat import format_result
from basecalc.number import SEPARATORS, ParseError
from basecalc.numeric import ComplexErfWarning
from basecalc.persist import StateError, load_state, save_state, state_path
from basecalc.tokenizer import tokenize


def calculate(line, context):
    '''Tokenize and evaluate line.  On success the value becomes the
    previous result (&) and the Result is returned; otherwise ParseError
    or EvaluationError is raised and the previous result is unchanged.
    '''
    result = evaluate(tokenize(line, context), context)
    context.prev_result = result.value
    return result


class Calculator(object):
    prompt = "> "

    def __init__(self, context=None, display=None, persist=False):
        '''If persist is true, the settings and history are saved after
        every line read by run().
        '''
        self.context = context if context is not None else Context()
        self.display = display if display is not None else Display()
        self.persist = persist

    def execute(self, line, echo=False):
        '''Evaluate one line and display the outcome.  Returns the Result
        or None.  If echo is true, the line is shown before the caret of a
        positional error (it wasn't typed at a prompt).
        '''
        self.display.echo(line)
        if not line.strip(SEPARATORS):
            return None
        self.context.history.append(line)
        try:
            result = self.calculate(line)
        except ParseError as e:
            if e.positional:
                if echo:
                    self.display.err(self.prompt + line)
                self.display.caret(len(self.prompt) + e.offset)
                self.display.err(e.message)
            elif e.message:
                self.display.msg(e.message)
            return None
        except EvaluationError as e:
            self.display.err(str(e))
            return None
        self.display.msg(format_result(result, self.context))
        return result

    def calculate(self, line):
        '''calculate() with every ComplexErfWarning the line raises shown
        as an error message, once per occurrence.
        '''
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ComplexErfWarning)
            try:
                return calculate(line, self.context)
            finally:
                for w in caught:
                    self.display.err(str(w.message))

    def read_line(self, stream=None):
        if stream is not None:
            line = stream.readline()
            if not line:
                raise EOFError
            return line.rstrip("\r\n")
        return input(self.prompt)

    def load_history(self):
        'Make the saved history available to line editing.'
        if readline is None:
            return
        readline.clear_history()
        for line in self.context.history:
            readline.add_history(line)

    def save(self):
        if not self.persist:
            return
        try:
            save_state(self.context)
        except OSError as e:
            self.display.err("Could not write state to:\n  %s\n%s" %
                             (state_path(), e))

    def run(self, stream=None):
        '''Read and evaluate lines until end of input.  Lines come from
        stream if it's given, otherwise from the terminal with line
        editing.
        '''
        if stream is None:
            self.load_history()
        while True:
            try:
                line = self.read_line(stream)
            except EOFError:
                break
            except KeyboardInterrupt:
                self.display.msg("")
                break
            try:
                self.execute(line, echo=stream is not None)
            except Exception:
                self.display.err("Something bad happened.  Don't do that again!")
                traceback.print_exc()
            self.save()


def ParseCommandLine(args=None):
    usage = "usage: %prog [options]"
    descr = "Arbitrary precision complex calculator for bases 2 through 36"
    parser = OptionParser(usage, description=descr)
    d, e, l, s, v = ("Use the default configuration; don't read or save state",
                     "Evaluate the expression and exit (may be repeated)",
                     "Append a log of the session to the file",
                     "Take input from stdin",
                     "Display program version")
    parser.add_option("-d", "--default-config", action="store_true", help=d)
    parser.add_option("-e", "--expression", action="append",
                      dest="expressions", help=e)
    parser.add_option("-l", "--log", dest="logfile", help=l)
    parser.add_option("-s", "--read-stdin", action="store_true", help=s)
    parser.add_option("-v", "--version", action="store_true", help=v)
    return parser.parse_args(args=args)

def GetContext(options, display):
    '''Return the saved Context, or a default one if the -d option was
    given or there is no usable saved state.
    '''
    if options.default_config:
        return Context()
    try:
        return load_state()
    except FileNotFoundError:
        pass
    except (OSError, SyntaxError, ValueError, StateError) as e:
        display.msg("Could not read state file:\n  %s\n%s" % (state_path(), e))
        display.msg("Using default configuration")
    return Context()

def main(argv=None):
    opt, args = ParseCommandLine(argv)
    display = Display()
    if opt.version:
        display.msg("basecalc version %s" % __version__)
        return 0
    context = GetContext(opt, display)
    calculator = Calculator(context, display, persist=not opt.default_config)
    log = None
    if opt.logfile:
        log = open(opt.logfile, "a")
        display.logon(log)
    try:
        if opt.expressions:
            for line in opt.expressions:
                calculator.execute(line, echo=True)
            calculator.save()
        elif opt.read_stdin:
            calculator.run(sys.stdin)
        else:
            calculator.run()
    finally:
        if log is not None:
            display.logoff()
            log.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
