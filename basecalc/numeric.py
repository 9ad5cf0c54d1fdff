'''
The numeric engine: the operators, functions and constants of the
expression language, evaluated with the mpmath context of a calculator.

Every value is an mpc.  Division by zero and the like produce NaN
instead of raising, so an expression such as 1/0 displays as NaN.

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

import warnings
from functools import wraps

from basecalc.debug import trace
from basecalc.number import IMAGINARY, REAL
from basecalc.tables import Op


class ComplexErfWarning(UserWarning):
    '''Issued when #erf is given a value with a nonzero imaginary part;
    the approximation used isn't accurate there.
    '''


def ieee(f):
    '''Decorator that turns the ZeroDivisionError mpmath raises for
    things like 1/0 into a NaN result.
    '''
    @wraps(f)
    def wrapper(self, *args):
        try:
            return f(self, *args)
        except ZeroDivisionError:
            trace(self.context, "%s: division by zero, result is NaN",
                  f.__name__)
            return self.nan()
    return wrapper


class Engine(object):
    def __init__(self, context):
        self.context = context
        self.m = context.mp
        self.binary_functions = {
            Op.ADD:       self.add,
            Op.SUBTRACT:  self.subtract,
            Op.MULTIPLY:  self.multiply,
            Op.DIVIDE:    self.divide,
            Op.POWER:     self.power,
            Op.MODULUS:   self.modulus,
            Op.LOGARITHM: self.log_base,
        }
        self.unary_functions = {
            Op.NEGATE: self.negate,
            Op.ABS:    self.abs,
            Op.SQRT:   self.sqrt,
            Op.LN:     self.ln,
            Op.LOG:    self.log,
            Op.SIN:    self.sin,
            Op.COS:    self.cos,
            Op.TAN:    self.tan,
            Op.ASIN:   self.asin,
            Op.ACOS:   self.acos,
            Op.ATAN:   self.atan,
            Op.CEIL:   self.ceil,
            Op.FLOOR:  self.floor,
            Op.ROUND:  self.round,
            Op.INT:    self.int_part,
            Op.FRAC:   self.frac_part,
            Op.RE:     self.real_part,
            Op.IM:     self.imag_part,
            Op.ANGLE:  self.angle,
            Op.SIGN:   self.sign,
            Op.ERF:    self.erf,
        }
        self.constants = {
            Op.PI:       self.Pi,
            Op.PHI:      self.Phi,
            Op.E:        self.E,
            Op.GAMMA:    self.Gamma,
            Op.RAND:     self.rand,
            Op.GRAND:    self.grand,
            Op.PREVIOUS: self.previous,
        }

    #---------------------------------------------------------------------------
    # Utility functions

    def c(self, x, y=0):
        return self.m.mpc(x, y)

    def nan(self):
        return self.m.mpc(self.m.nan, self.m.nan)

    def Conv2Rad(self, x):
        '''
        Convert an angle in the current angle units to radians.  This is
        done before calling trig functions.
        '''
        if self.context.radians:
            return x
        return x*self.m.pi/180

    def Conv2Deg(self, x):
        '''
        Convert an angle in radians to the current angle units.  This is
        done after calling inverse trig functions.
        '''
        if self.context.radians:
            return x
        return x*180/self.m.pi

    def componentwise(self, z, f):
        '''Apply the real function f to both parts of z.  Parts that are
        infinite or NaN are left alone.
        '''
        parts = []
        for x in (z.real, z.imag):
            if self.m.isfinite(x):
                x = f(x)
            parts.append(x)
        return self.c(*parts)

    def _round(self, x):
        # Halves round away from zero
        if x < 0:
            return -self._round(-x)
        n = self.m.floor(x)
        if x - n >= 0.5:
            n += 1
        return n

    def _mod(self, a, b):
        if b == 0:
            return self.m.zero
        return a - b*self.m.floor(a/b)

    #---------------------------------------------------------------------------
    # Values

    def number(self, token):
        '''Return the value of a number token, read in the current base.
        '''
        parts = []
        for part in (REAL, IMAGINARY):
            x = self._digits(token.digits(part, True),
                             token.digits(part, False))
            if token.sign[part]:
                x = -x
            parts.append(x)
        return self.c(*parts)

    def _digits(self, integer, fraction):
        base = self.context.base
        whole = self.m.mpf(0)
        for digit in integer:
            whole = whole*base + digit
        frac = self.m.mpf(0)
        for digit in reversed(fraction):
            frac = (frac + digit)/base
        return whole + frac

    def value(self, token):
        '''Return the value of a number, variable or constant token.'''
        if token.is_number():
            return self.number(token)
        if token.op is Op.VARIABLE:
            return self.context.variables[token.var_index].value
        return self.constants[token.op]()

    #---------------------------------------------------------------------------
    # Binary functions

    def add(self, a, b):
        '''
    Usage: a + b
        '''
        return a + b

    def subtract(self, a, b):
        '''
    Usage: a - b
        '''
        return a - b

    def multiply(self, a, b):
        '''
    Usage: a * b
        '''
        return a*b

    @ieee
    def divide(self, a, b):
        '''
    Usage: a / b

    Division by zero gives NaN.
        '''
        return a/b

    @ieee
    def power(self, a, b):
        '''
    Usage: a ^ b

    Returns the principal value of a to the power b.
        '''
        return self.c(self.m.power(a, b))

    def modulus(self, a, b):
        '''
    Usage: a % b

    Computed separately for the real and imaginary parts as
    a - b*floor(a/b).  A part whose divisor is zero gives 0.
        '''
        return self.c(self._mod(a.real, b.real), self._mod(a.imag, b.imag))

    @ieee
    def log_base(self, a, b):
        '''
    Usage: a $ b

    Returns the logarithm of a to the base b.
        '''
        return self.m.ln(a)/self.m.ln(b)

    #---------------------------------------------------------------------------
    # Unary functions

    def negate(self, x):
        return -x

    def abs(self, x):
        '''
    Usage: #abs x

    Returns the magnitude of x as a real number
        '''
        return self.c(abs(x))

    def sqrt(self, x):
        return self.c(self.m.sqrt(x))

    @ieee
    def ln(self, x):
        '''
    Usage: #ln x

    Returns the natural logarithm of x.  #ln 0 is NaN.
        '''
        return self.c(self.m.ln(x))

    @ieee
    def log(self, x):
        '''
    Usage: #log x

    Returns the logarithm of x in the current base
        '''
        return self.c(self.m.ln(x)/self.m.ln(self.context.base))

    def sin(self, x):
        return self.c(self.m.sin(self.Conv2Rad(x)))

    def cos(self, x):
        return self.c(self.m.cos(self.Conv2Rad(x)))

    @ieee
    def tan(self, x):
        return self.c(self.m.tan(self.Conv2Rad(x)))

    def asin(self, x):
        return self.Conv2Deg(self.c(self.m.asin(x)))

    def acos(self, x):
        return self.Conv2Deg(self.c(self.m.acos(x)))

    @ieee
    def atan(self, x):
        return self.Conv2Deg(self.c(self.m.atan(x)))

    def ceil(self, x):
        '''
    Usage: #ceil x

    Gaussian ceiling:  the ceiling of each part of x
        '''
        return self.componentwise(x, self.m.ceil)

    def floor(self, x):
        '''
    Usage: #floor x

    Gaussian floor:  the floor of each part of x
        '''
        return self.componentwise(x, self.m.floor)

    def round(self, x):
        '''
    Usage: #round x

    Rounds each part of x to the nearest integer, halves away from zero
        '''
        return self.componentwise(x, self._round)

    def int_part(self, x):
        return self.floor(x)

    def frac_part(self, x):
        return x - self.floor(x)

    def real_part(self, x):
        return self.c(x.real)

    def imag_part(self, x):
        '''
    Usage: #im x

    Returns the imaginary part of x as a real number
        '''
        return self.c(x.imag)

    def angle(self, x):
        '''
    Usage: #angle x

    Returns the angle of x in the complex plane in the current angle units
        '''
        return self.Conv2Deg(self.c(self.m.atan2(x.imag, x.real)))

    def sign(self, x):
        '''
    Usage: #sign x

    Returns x/|x|, the unit value in the direction of x.  #sign 0 is 0.
        '''
        if x == 0:
            return x
        return x/abs(x)

    def erf(self, x):
        '''
    Usage: #erf x

    Gaussian error function.  A power series is used for |x| < 1/2 and
    the Abramowitz and Stegun rational approximation 7.1.26 otherwise, so
    the result is only good to about seven decimal places there.  The
    approximation isn't meant for complex arguments; a ComplexErfWarning
    is issued for those.
        '''
        if x.imag != 0:
            warnings.warn("Warning: complex gaussian error function is "
                          "likely incorrect!", ComplexErfWarning)
        if abs(x) < 0.5:
            return self._erf_series(x)
        if x.real < 0:
            return -self._erf_approximation(-x)
        return self._erf_approximation(x)

    def _erf_series(self, z):
        m = self.m
        epsilon = m.ldexp(m.mpf(1), -self.context.precision)
        z2 = z*z
        power = z           # (-1)**n z**(2n+1)/n!
        total = z
        n = 0
        while abs(power) > epsilon:
            n += 1
            power = -power*z2/n
            total += power/(2*n + 1)
        return self.c(total*2/m.sqrt(m.pi))

    def _erf_approximation(self, z):
        m = self.m
        t = 1/(1 + m.mpf("0.3275911")*abs(z))
        poly = t*(m.mpf("0.254829592") +
               t*(m.mpf("-0.284496736") +
               t*(m.mpf("1.421413741") +
               t*(m.mpf("-1.453152027") +
               t*m.mpf("1.061405429")))))
        return self.c(1 - poly*m.exp(-z*z))

    ############################################################################
    # constants
    ############################################################################

    def Pi(self):
        return self.c(self.m.pi)

    def Phi(self):
        '''
    Usage: @phi

    Returns Phi (the golden ratio)
        '''
        return self.c(self.m.phi)

    def E(self):
        return self.c(self.m.e)

    def Gamma(self):
        '''
    Usage: @gamma

    Returns the Euler-Mascheroni constant
        '''
        return self.c(self.m.euler)

    def rand(self):
        '''
    Usage: @rand

    Return a uniformly-distributed random number in [0, 1) drawn from the
    context's random number source.
        '''
        return self.c(self.context.uniform())

    @ieee
    def grand(self):
        '''
    Usage: @grand

    Return a complex number whose parts are independent standard normal
    deviates (Box-Muller transform of two uniform draws).
        '''
        m = self.m
        u1 = self.context.uniform()
        u2 = self.context.uniform()
        r = m.sqrt(-2*m.ln(u1))
        theta = 2*m.pi*u2
        return self.c(r*m.cos(theta), r*m.sin(theta))

    def previous(self):
        return self.context.prev_result
