import io

import pytest

from cursus.stack import Node, PushSwap, PushSwapError, format_stack, is_sorted


def make(values):
    out = io.StringIO()
    return PushSwap(values, out), out


def values(stack):
    return [node.value for node in stack]


def test_sa_swaps_value_and_index():
    ps, out = make([Node(1, index=7), Node(2, index=9), Node(3)])
    ps.sa()
    assert values(ps.a) == [2, 1, 3]
    assert [ps.a[0].index, ps.a[1].index] == [9, 7]
    assert out.getvalue() == "sa\n"


def test_sa_single_element_still_prints():
    ps, out = make([5])
    ps.sa()
    assert values(ps.a) == [5]
    assert out.getvalue() == "sa\n"


def test_push_moves_top_between_stacks():
    ps, out = make([1, 2, 3])
    ps.pb()
    ps.pb()
    assert values(ps.a) == [3]
    assert values(ps.b) == [2, 1]
    ps.pa()
    assert values(ps.a) == [2, 3]
    assert values(ps.b) == [1]
    assert out.getvalue() == "pb\npb\npa\n"


def test_pa_with_empty_b_is_noop():
    ps, out = make([1, 2])
    ps.pa()
    assert values(ps.a) == [1, 2]
    assert list(ps.b) == []
    assert out.getvalue() == "pa\n"


def test_rotate_moves_top_to_bottom():
    ps, out = make([1, 2, 3, 4])
    ps.ra()
    assert values(ps.a) == [2, 3, 4, 1]
    ps.rra()
    assert values(ps.a) == [1, 2, 3, 4]
    ps.rra()
    assert values(ps.a) == [4, 1, 2, 3]
    assert out.getvalue() == "ra\nrra\nrra\n"


def test_combined_operations_affect_both_stacks():
    ps, out = make([1, 2, 3, 4, 5, 6])
    ps.pb()
    ps.pb()
    ps.pb()
    ps.ss()
    assert values(ps.a) == [5, 4, 6]
    assert values(ps.b) == [2, 3, 1]
    ps.rr()
    assert values(ps.a) == [4, 6, 5]
    assert values(ps.b) == [3, 1, 2]
    ps.rrr()
    assert values(ps.a) == [5, 4, 6]
    assert values(ps.b) == [2, 3, 1]
    assert out.getvalue().splitlines()[-3:] == ["ss", "rr", "rrr"]


def test_b_only_operations():
    ps, out = make([1, 2, 3])
    ps.pb()
    ps.pb()
    ps.pb()
    ps.sb()
    ps.rb()
    ps.rrb()
    assert values(ps.b) == [2, 3, 1]
    assert values(ps.a) == []
    assert out.getvalue().splitlines()[-3:] == ["sb", "rb", "rrb"]


@pytest.mark.parametrize(
    "ops",
    [
        ["pb", "ra", "sa", "pb", "rr", "rrr", "pa", "ss", "pa"],
        ["rra", "pb", "pb", "pb", "rrb", "sb", "pa", "ra"],
    ],
)
def test_operations_preserve_multiset(ops):
    start = [4, 8, 15, 16, 23, 42]
    ps, out = make(start)
    for op in ops:
        getattr(ps, op)()
    assert sorted(values(ps.a) + values(ps.b)) == sorted(start)
    assert out.getvalue().split() == ops


def test_rotate_short_stack_is_noop():
    ps, _ = make([9])
    ps.ra()
    ps.rra()
    assert values(ps.a) == [9]


def test_is_sorted():
    assert is_sorted([Node(1), Node(2), Node(3)]) is True
    assert is_sorted([Node(2), Node(1)]) is False
    assert is_sorted([Node(7)]) is True


def test_format_stack():
    assert format_stack([Node(3), Node(-1), Node(2)]) == "3 -1 2"
    assert format_stack([]) == ""


def test_error_message():
    error = PushSwapError()
    assert str(error) == "Error"
    assert isinstance(error, Exception)