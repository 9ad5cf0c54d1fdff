'''
Formatting of mpmath numbers in an arbitrary base.

A part (the real or imaginary component of a value) is shown with the
current number of significant digits, grouped in threes away from the
radix point.  A '~' after the digits means the shown value is not exact.
Values too large or too small to show positionally are shown as a
mantissa followed by " :" and a signed exponent in the same base, e.g.
"1.86 BA3~ :-17".

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

from basecalc.tables import DIGITS

# Dozenal digit names used by the :dms display
DMS_NAMES = ("Zil", "Zila", "Zilor", "Ter", "Tera", "Teror",
             "Lun", "Luna", "Lunor", "Stel", "Stela", "Stelor")


class mpFormatException(Exception): pass


class mpFormat(object):
    '''Formats the parts of complex numbers for a calculator context.

    Methods:
        part(x)     Format one mpf
        format(z)   Format a complex value, using brackets only when it
                    has a nonzero imaginary part

    For example, with a context in base 12 showing 24 digits,

        fmt = mpFormat(context)
        fmt.format(context.mp.mpc(5) ** -25)

    gives

          1.86 BA3 547 200 980 95A 405 483~ :-17

    Class variables:

        symbols         Sequence of the strings used for each digit
        group_size      Number of digits between group separators
    '''

    decimal_point = "."
    group_separator = " "
    group_size = 3
    inexact_mark = "~"
    exponent_mark = " :"
    nan = "NaN"
    symbols = DIGITS

    def __init__(self, context, base=None, symbols=None):
        self.mp = context.mp
        self.base = base if base is not None else context.base
        self.num_digits = context.digits
        if symbols is not None:
            self.symbols = symbols
        if len(self.symbols) < self.base:
            raise mpFormatException("Need %d digit symbols, have %d" %
                                    (self.base, len(self.symbols)))

    def _mantissa(self, magnitude, place):
        '''Scale magnitude by base**-place and add half a unit in the last
        shown digit, so truncating the digits rounds them.
        '''
        b = self.mp.mpf(self.base)
        return magnitude / b**place + b**(1 - self.num_digits) / 2

    def _next_digit(self, mantissa):
        digit = min(int(self.mp.floor(mantissa)), self.base - 1)
        return digit, (mantissa - digit) * self.base

    def _digits(self, mantissa, place):
        '''Generate the digits.  Returns (integer symbols, fraction
        symbols, what is left of the mantissa, whether the radix point
        falls within the shown digits).
        '''
        integer, fraction = [], []
        count = 0
        offset = -place
        while offset <= 0 and count < self.num_digits:
            count += 1
            digit, mantissa = self._next_digit(mantissa)
            integer.append(self.symbols[digit])
            offset = count - place
            if offset % self.group_size == 1 and offset != 1:
                integer.append(self.group_separator)
        point = offset == 1
        while offset > 0 and count < self.num_digits:
            count += 1
            digit, mantissa = self._next_digit(mantissa)
            fraction.append(self.symbols[digit])
            offset = count - place
            if offset % self.group_size == 1:
                fraction.append(self.group_separator)
        return integer, fraction, mantissa, point

    def part(self, x):
        mp = self.mp
        if x == 0:
            return " " + self.symbols[0] + self.decimal_point
        if mp.isnan(x) or mp.isinf(x):
            return self.nan
        sign = " " if x > 0 else "-"
        magnitude = abs(x)
        # place and base**place need as many more bits as the binary
        # exponent has.
        guard = abs(mp.mag(magnitude)).bit_length() + 16
        with mp.extraprec(guard):
            b = mp.mpf(self.base)
            place = int(mp.floor(mp.log(magnitude, 2) / mp.log(b, 2)))
            mantissa = self._mantissa(magnitude, place)
            # The logarithm can land one place off near powers of the base.
            while mantissa < 1:
                place -= 1
                mantissa = self._mantissa(magnitude, place)
            while mantissa >= b:
                place += 1
                mantissa = self._mantissa(magnitude, place)
            integer, fraction, mantissa, point = self._digits(mantissa, place)
            inexact = abs(mantissa*2 - b) > mp.mpf(2)**-16
        mark = self.inexact_mark if inexact else " "
        if point:
            whole = "".join(integer) or self.symbols[0]
            return (sign + whole + self.decimal_point +
                    "".join(trim_zeros(fraction, self.symbols[0])) + mark)
        number = trim_zeros(integer or fraction, self.symbols[0])
        if not number:
            number = [self.symbols[0]]
        if place < 0:
            exponent = "-" + format_int(-place, self.base)
        else:
            exponent = " " + format_int(place, self.base)
        return (sign + number[0] + self.decimal_point + "".join(number[1:]) +
                mark + self.exponent_mark + exponent)

    def format(self, z):
        z = self.mp.mpc(z)
        real, imag = z.real, z.imag
        for x in (real, imag):
            if self.mp.isnan(x) or self.mp.isinf(x):
                return self.nan
        if imag == 0:
            s = " " + self.part(real)
        else:
            s = "[" + self.part(real) + " ," + self.part(imag) + " ]"
        return s.rstrip()


def trim_zeros(symbols, zero="0"):
    '''Return the list of symbols without its trailing zeros and group
    separators.
    '''
    end = len(symbols)
    while end and symbols[end - 1] in (zero, mpFormat.group_separator):
        end -= 1
    return symbols[:end]

def format_int(n, base):
    '''Return the nonnegative integer n as a string of digits in base.'''
    if n < 0:
        raise mpFormatException("format_int needs a nonnegative integer")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(DIGITS[digit])
    digits.reverse()
    return "".join(digits)

def format_number(value, context):
    'Format a value for display in the current base.'
    return mpFormat(context).format(value)

def format_dms(value, context):
    'Format a value in dozenal using the digit names.'
    return mpFormat(context, base=12, symbols=DMS_NAMES).format(value)

def format_result(result, context):
    '''Format an evaluation result; assignments are shown as
    "@name = value".
    '''
    s = format_number(result.value, context)
    if result.assignment is not None:
        name = context.variables[result.assignment].name
        return "@%s = %s" % (name, s)
    return s
