'''
Operand stack tests
'''

from pytest import raises

from basecalc.stack import NotEnoughArguments, Stack, StackIsEmpty


def test_binary_order():
    s = Stack()
    s.push(10)
    s.push(4)
    s.binary(lambda left, right: left - right)
    assert s.size() == 1
    assert s.pop() == 6


def test_unary():
    s = Stack()
    s.push(3)
    s.unary(lambda x: -x)
    assert s.pop() == -3


def test_not_enough():
    s = Stack()
    with raises(NotEnoughArguments):
        s.unary(abs)
    s.push(1)
    with raises(NotEnoughArguments):
        s.binary(max)
    assert s.size() == 1


def test_pop_empty():
    with raises(StackIsEmpty):
        Stack().pop()


def test_string():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s._string(str) == " 1: 1\n 0: 2"
