'''
The calculator's state: base, digits, angle mode, variables, the previous
result, the history and the random number source.

Each Context owns an mpmath MPContext, so two calculators with different
precisions don't disturb each other (or the global mpmath.mp).

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

import math
import random

from mpmath.ctx_mp import MPContext

# Guard bits carried beyond what the displayed digits need
PADDING = 32

DEFAULT_BASE = 10
DEFAULT_DIGITS = 12


class Variable(object):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return "Variable(%r, %s)" % (self.name, self.value)


class Context(object):
    '''rng is anything with a getrandbits(k) method; random.Random is
    used if it isn't given.  Pass a seeded random.Random for repeatable
    @rand and @grand values.
    '''
    def __init__(self, base=DEFAULT_BASE, digits=DEFAULT_DIGITS,
                 radians=True, debug=False, rng=None):
        if not 2 <= base <= 36:
            raise ValueError("base must be between 2 and 36")
        if digits < 1:
            raise ValueError("digits must be positive")
        self.mp = MPContext()
        self.base = base
        self.digits = digits
        self.padding = PADDING
        self.radians = radians
        self.debug = debug
        self.rng = rng if rng is not None else random.Random()
        self.variables = []
        self.history = []
        self.set_precision()
        self.prev_result = self.zero()

    def set_precision(self):
        '''Set the working precision in bits from the base and the number
        of digits shown.
        '''
        bits = int(math.ceil(self.digits*math.log2(self.base)))
        self.precision = bits + self.padding
        self.mp.prec = self.precision

    def set_base(self, base):
        self.base = base
        self.set_precision()

    def set_digits(self, digits):
        self.digits = digits
        self.set_precision()

    def zero(self):
        return self.mp.mpc(0)

    def find_variable(self, name):
        'Return the index of the variable called name or None.'
        for i, variable in enumerate(self.variables):
            if variable.name == name:
                return i
        return None

    def add_variable(self, name):
        '''Append a new variable with the value 0 and return its index.
        Indexes stay valid for the life of the context.
        '''
        self.variables.append(Variable(name, self.zero()))
        return len(self.variables) - 1

    def uniform(self):
        '''Return an mpf uniformly distributed in [0, 1) using all the bits
        of the working precision.
        '''
        bits = self.precision
        return self.mp.ldexp(self.mp.mpf(self.rng.getrandbits(bits)), -bits)
