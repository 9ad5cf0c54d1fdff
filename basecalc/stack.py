'''
The value stack used by the evaluator.

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

# Exceptions for the Stack class
class CalcException(Exception):          pass
class StackIsEmpty(CalcException):       pass
class NotEnoughArguments(CalcException): pass


class Stack(object):
    '''Operand stack for the evaluator; the top is the end of the list.
    '''
    def __init__(self):
        self.values = []

    def unary(self, function):
        'Replace the top value x with function(x).'
        if not self.values:
            raise NotEnoughArguments("Stack is empty")
        self.values[-1] = function(self.values[-1])

    def binary(self, function):
        '''Replace the two top values with function(left, right), where
        right is the top and left the value under it.
        '''
        if len(self.values) < 2:
            raise NotEnoughArguments("Have %d of 2 operands" % len(self.values))
        right = self.values.pop()
        left = self.values.pop()
        self.values.append(function(left, right))

    def size(self):
        return len(self.values)

    def push(self, x):
        self.values.append(x)

    def pop(self):
        if not self.values:
            raise StackIsEmpty("Nothing to pop")
        return self.values.pop()

    def _string(self, func):
        '''Show the values bottom first, one per line, numbered by depth
        (0 is the top).  func formats a value.
        '''
        depth = len(self.values)
        lines = []
        for value in self.values:
            depth -= 1
            lines.append("%2d: %s" % (depth, func(value)))
        return "\n".join(lines)
