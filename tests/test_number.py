'''
Number literal scanner tests
'''

from pytest import raises

from basecalc.context import Context
from basecalc.mpformat import format_int, format_number
from basecalc.number import ParseError, Token, parse_number
from basecalc.tables import Op


def error(line, base=10, index=0):
    with raises(ParseError) as e:
        parse_number(line, base, index)
    return e.value.message, e.value.offset


def test_integer():
    token, index = parse_number("123+4", 10, 0)
    assert token.is_number()
    assert token.real_integer == [1, 2, 3]
    assert token.real_fraction == []
    assert index == 3


def test_fraction_and_separators():
    token, index = parse_number(" 1_2 .3\t4", 10, 0)
    assert token.real_integer == [1, 2]
    assert token.real_fraction == [3, 4]
    assert index == 9


def test_leading_point():
    token, index = parse_number(".5", 10, 0)
    assert token.real_integer == []
    assert token.real_fraction == [5]


def test_signs_toggle():
    token, _ = parse_number("-5", 10, 0)
    assert token.sign == [True, False]
    token, _ = parse_number("--5", 10, 0)
    assert token.sign == [False, False]


def test_minus_after_digits_ends_number():
    token, index = parse_number("5-3", 10, 0)
    assert token.real_integer == [5]
    assert index == 1


def test_complex():
    token, index = parse_number("[-1.5, -2]*3", 10, 0)
    assert token.real_integer == [1]
    assert token.real_fraction == [5]
    assert token.imaginary_integer == [2]
    assert token.sign == [True, True]
    assert index == 10


def test_letters_are_digits():
    token, _ = parse_number("fF", 16, 0)
    assert token.real_integer == [15, 15]
    token, _ = parse_number("Zz", 36, 0)
    assert token.real_integer == [35, 35]


def test_start_index():
    token, index = parse_number("1+23", 10, 2)
    assert token.real_integer == [2, 3]
    assert index == 4


def test_errors():
    assert error("") == ("Incomplete expression!", 0)
    assert error("  ") == ("Incomplete expression!", 2)
    assert error("*1") == ("Invalid number!", 0)
    assert error("-") == ("Invalid number!", 1)
    assert error("1.2.3") == ("Multiple decimals in number!", 3)
    assert error("1]") == ("Unexpected ']'!", 1)
    assert error("1,2") == ("Unexpected ','!", 1)
    assert error("[1,2,3]") == ("Unexpected ','!", 4)
    assert error("1[2]") == ("Unexpected '['!", 1)
    assert error("[[1,2]") == ("Unexpected '['!", 1)
    assert error("[,1]") == ("Missing real component!", 3)
    assert error("[1,]") == ("Missing imaginary component!", 3)
    assert error("[1]") == ("Missing imaginary component!", 2)
    assert error("[1,2") == ("Unclosed complex number!", 4)


def test_digit_range():
    assert error("102", base=2) == ("Digit out of binary (2) range!", 2)
    assert error("9", base=9) == ("Digit out of nonary (9) range!", 0)
    assert error("1a", base=10) == ("Digit out of decimal (A) range!", 1)
    assert error("c", base=12) == ("Digit out of dozenal (C) range!", 0)


def integer_value(text, base):
    token, _ = parse_number(text, base, 0)
    assert not token.real_fraction and not token.has_imaginary()
    value = 0
    for digit in token.real_integer:
        value = value*base + digit
    return value


def test_format_int_round_trip():
    for base in range(2, 37):
        for n in (1, 7, 35, 36, 1295, 123456789):
            assert integer_value(format_int(n, base), base) == n


def test_format_number_round_trip():
    for base in range(2, 37):
        for digits in (4, 12, 30):
            context = Context(base=base, digits=digits)
            # Exactly as many digits as are shown, so no exponent
            n = base**digits - 2
            text = format_number(context.mp.mpc(n), context)
            assert text.endswith(".")
            assert integer_value(text, base) == n


def test_token_str():
    token, _ = parse_number("[1.2,-3]", 10, 0)
    assert str(token) == "[+1.2 , -3.]"
    assert str(Token(Op.ADD, 2)) == "+:2"
