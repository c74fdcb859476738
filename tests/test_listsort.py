import itertools

import pytest

from minids.listsort import (
    Element,
    build_list,
    check_list,
    listsort,
    main,
    to_values,
)

CASES = ["abcdefghijklm", "gcielbmhdjfak", "mlkjihgfedcba"]
SHAPES = list(itertools.product([False, True], [False, True]))


def test_empty_list_sorts_to_none():
    assert listsort(None) is None
    assert listsort(None, True, True) is None


@pytest.mark.parametrize("is_circular,is_double", SHAPES)
@pytest.mark.parametrize("case", CASES)
def test_sorts_every_shape(case, is_circular, is_double):
    head = build_list(case, is_circular, is_double)
    assert check_list(head, len(case), is_circular, is_double) == f"[{case}]"
    head = listsort(head, is_circular, is_double)
    rendered = check_list(head, len(case), is_circular, is_double, True)
    assert rendered == "[abcdefghijklm]"
    assert to_values(head) == sorted(case)


@pytest.mark.parametrize("is_circular,is_double", SHAPES)
def test_single_element(is_circular, is_double):
    head = build_list([7], is_circular, is_double)
    result = listsort(head, is_circular, is_double)
    assert result is head
    assert to_values(result) == [7]
    assert check_list(result, 1, is_circular, is_double, True) == "[7]"


@pytest.mark.parametrize("is_circular,is_double", SHAPES)
def test_sort_is_stable(is_circular, is_double):
    head = build_list([3, 1, 3, 2, 1], is_circular, is_double)
    first_three = head
    second_three = head.next.next
    result = listsort(head, is_circular, is_double)
    nodes = []
    node = result
    for _ in range(5):
        nodes.append(node)
        node = node.next
    assert [n.value for n in nodes] == sorted([3, 1, 3, 2, 1])
    assert nodes[3] is first_three
    assert nodes[4] is second_three


def test_build_list_empty():
    assert build_list([]) is None
    assert to_values(None) == []
    assert check_list(None, 0) == "[]"


def test_build_list_links():
    head = build_list("xyz", is_circular=True, is_double=True)
    assert head.next.next.next is head
    assert head.prev.value == "z"
    assert to_values(head) == ["x", "y", "z"]


def test_check_list_rejects_bad_ordering():
    head = build_list("ba")
    with pytest.raises(ValueError, match="Bad ordering"):
        check_list(head, 2, check_ordering=True)


def test_check_list_rejects_duplicate_values_when_ordering():
    head = build_list("aa")
    with pytest.raises(ValueError, match="Bad ordering"):
        check_list(head, 2, check_ordering=True)


def test_check_list_rejects_too_many_nodes():
    head = build_list("abc")
    with pytest.raises(ValueError, match="Out-of-range pointer"):
        check_list(head, 2)


def test_check_list_rejects_loop_into_middle():
    head = build_list("abc")
    head.next.next.next = head.next
    with pytest.raises(ValueError, match="Duplicate element"):
        check_list(head, 5)


def test_check_list_rejects_bad_tail_link():
    head = build_list("abc", is_circular=False)
    with pytest.raises(ValueError, match="Bad next link"):
        check_list(head, 3, is_circular=True)


def test_check_list_rejects_bad_head_prev():
    head = build_list("abc", is_double=True)
    head.prev = head.next
    with pytest.raises(ValueError, match="Bad prev link from list head"):
        check_list(head, 3, is_double=True)


def test_check_list_rejects_bad_inner_prev():
    head = build_list("abc", is_double=True)
    head.next.next.prev = head
    with pytest.raises(ValueError, match="Bad prev link from node"):
        check_list(head, 3, is_double=True)


def test_element_holds_value():
    element = Element("q")
    assert element.value == "q"
    assert element.next is None and element.prev is None


def test_main_reports_all_passed(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "testing straight singly linked list" in out
    assert "testing circular doubly linked list" in out
    assert "    [gcielbmhdjfak] -> [abcdefghijklm] ok" in out
    assert "passed 12 failed 0 total 12" in out


def test_main_reports_failure_for_repeated_letters(capsys):
    assert main(["aab"]) == 1
    out = capsys.readouterr().out
    assert "Bad ordering" in out
    assert "failed 4" in out