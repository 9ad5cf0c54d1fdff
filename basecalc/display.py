'''
Output for the interactive calculator.

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
import time

nl = "\n"


class Display(object):
    '''Writes results to one stream and errors to another (stdout and
    stderr unless others are given).  Everything written, and every input
    line passed to echo(), is also copied to the log streams added with
    logon().
    '''
    def __init__(self, out_stream=None, err_stream=None):
        self.out = out_stream or sys.stdout
        self.error = err_stream or sys.stderr
        self.streams = []

    def msg(self, string):
        'Normal message string to the user.'
        self.out.write(string + nl)
        self.log(string)

    def err(self, string):
        '''Error message string to the user.  Multi-line messages are
        written as given.
        '''
        self.error.write(string + nl)
        self.log(string)

    def caret(self, column):
        '''Point at a column of the input line shown above.'''
        self.err(" "*column + "^")

    def echo(self, line):
        'Record an input line in the logs only.'
        self.log('--> "%s"' % line)

    def logon(self, stream):
        '''Add a stream to send output to.'''
        self.streams.append(stream)
        stream.write("<< On " + time.asctime(time.localtime()) + ">>" + nl)

    def log(self, string):
        for stream in self.streams:
            stream.write(string + nl)

    def logoff(self):
        '''Turn off all streams.'''
        self.log("<< Off " + time.asctime(time.localtime()) + ">>")
        self.streams = []
