'''
Number formatting tests
'''

from pytest import raises

from basecalc.context import Context
from basecalc.evaluator import Result
from basecalc.mpformat import (format_dms, format_int, format_number,
                               format_result, mpFormat, mpFormatException,
                               trim_zeros)


def fmt(x, base=10, digits=12):
    context = Context(base=base, digits=digits)
    return format_number(context.mp.mpc(x), context)


def test_integers():
    assert fmt(0) == "  0."
    assert fmt(7) == "  7."
    assert fmt(-7) == " -7."
    assert fmt(12345) == "  12 345."
    assert fmt(1234567) == "  1 234 567."


def test_fractions():
    assert fmt(0.5) == "  0.5"
    assert fmt("0.125") == "  0.125"
    assert fmt(1/3.) == "  0.333 333 333 333~"
    assert fmt(-2/3.) == " -0.666 666 666 667~"


def test_exponents():
    assert fmt(10**15) == "  1.  : 15"
    assert fmt("1.5e20") == "  1.5  : 20"
    assert fmt("1e-5") == "  1.  :-5"


def test_rounding_carries():
    assert fmt("0.9999999999999") == "  1.~"
    assert fmt("999999999999.9") == "  1.~ : 12"


def test_complex():
    context = Context()
    assert format_number(context.mp.mpc(1, -1), context) == "[ 1.  ,-1.  ]"
    assert format_number(context.mp.mpc(0, 1), context) == "[ 0. , 1.  ]"


def test_nan():
    context = Context()
    m = context.mp
    assert format_number(m.mpc(m.nan, 0), context) == "NaN"
    assert format_number(m.mpc(1, m.inf), context) == "NaN"


def test_other_bases():
    assert fmt(255, base=16) == "  FF."
    assert fmt(5, base=2) == "  101."
    assert fmt(0.5, base=2) == "  0.1"
    assert fmt(35, base=36) == "  Z."
    assert fmt(144, base=12, digits=24) == "  100."


def test_digits_shown():
    assert fmt(1/3., digits=3) == "  0.333~"
    assert fmt(2/3., digits=1) == "  0.7~"


def test_part():
    context = Context()
    f = mpFormat(context)
    assert f.part(context.mp.mpf(0)) == " 0."
    assert f.part(context.mp.mpf(-2)) == "-2. "


def test_symbols():
    context = Context()
    with raises(mpFormatException):
        mpFormat(context, base=12, symbols="0123456789")


def test_dms():
    context = Context()
    m = context.mp
    assert format_dms(m.mpc(0), context) == "  Zil."
    assert format_dms(m.mpc(1), context) == "  Zila."
    assert format_dms(m.mpc(1.5), context) == "  Zila.Lun"
    assert format_dms(m.mpc(-13), context) == " -ZilaZila."


def test_trim_zeros():
    assert trim_zeros(list("1200 000 ")) == list("12")
    assert trim_zeros(list("000")) == []
    assert trim_zeros(["Zila", "Zil"], "Zil") == ["Zila"]


def test_format_int():
    assert format_int(0, 10) == "0"
    assert format_int(255, 16) == "FF"
    assert format_int(20, 12) == "18"
    assert format_int(35, 36) == "Z"
    with raises(mpFormatException):
        format_int(-1, 10)


def test_format_result():
    context = Context()
    context.add_variable("x")
    value = context.mp.mpc(5)
    assert format_result(Result(value, None), context) == "  5."
    assert format_result(Result(value, 0), context) == "@x =   5."


def test_huge_exponents(session):
    text = session("2^(10^30)").replace(" ", "")
    assert text.startswith("3.11")
    assert text.endswith("~:301029995663981195213738894724")
    text = session("0.5^(10^30)").replace(" ", "")
    assert text.startswith("3.21")
    assert text.endswith("~:-301029995663981195213738894725")


def test_exponent_beyond_precision():
    context = Context(base=2)
    m = context.mp
    x = m.mpc(m.ldexp(m.mpf(1), -10**12))
    assert format_number(x, context) == "  1.  :-" + format_int(10**12, 2)
    context = Context()
    x = context.mp.mpc(context.mp.mpf("1.1e-7040394354"))
    text = format_number(x, context).replace(" ", "")
    assert text.startswith("1.1")
    assert text.endswith(":-7040394354")
