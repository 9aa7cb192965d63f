import pytest

from dsakit.stack import Stack, StackOverflowError, StackUnderflowError


def test_worked_example():
    st = Stack(5)
    st.push(5)
    st.push(1)
    st.push(10)
    assert st.peek() == 10
    assert st.is_empty() is False
    st.pop()
    assert st.peek() == 1


def test_pop_returns_in_reverse_order():
    st = Stack(4)
    for value in (3, 6, 9):
        st.push(value)
    assert [st.pop(), st.pop(), st.pop()] == [9, 6, 3]
    assert st.is_empty() is True


def test_new_stack_is_empty():
    assert Stack(3).is_empty() is True


def test_overflow_at_capacity():
    st = Stack(2)
    st.push(1)
    st.push(2)
    with pytest.raises(StackOverflowError):
        st.push(3)
    assert st.peek() == 2


def test_zero_capacity_overflows():
    with pytest.raises(StackOverflowError):
        Stack(0).push(1)


def test_pop_empty_underflows():
    with pytest.raises(StackUnderflowError):
        Stack(3).pop()


def test_peek_empty_underflows():
    st = Stack(1)
    st.push(4)
    st.pop()
    with pytest.raises(StackUnderflowError):
        st.peek()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Stack(-1)