import pytest

from reclayout.copybook.hierarchy import build_structure
from reclayout.copybook.parser import Field, Usage, parse_copybook
from reclayout.layout.lengths import comp3_digits, comp_length, field_length, picture_length


@pytest.mark.parametrize(
    "picture, expected",
    [
        ("9", 1),
        ("9(8)", 8),
        ("x(20)", 20),
        ("X(20)", 20),
        ("zzzzz9", 6),
        ("ZZZZZ9", 6),
        ("s9(9)v9(2)", 11),
        ("S9(7)", 7),
        ("x", 1),
        ("-ZZ9", 4),
    ],
)
def test_picture_length(picture, expected):
    assert picture_length(picture) == expected


def test_comp3_length_law():
    assert comp_length("9(8)", Usage.COMP_3) == 5
    assert comp_length("s9(9)v9(2)", Usage.COMP_3) == 6
    assert comp_length("9", Usage.COMP_3) == 1
    for picture in ["9", "9(2)", "9(7)", "s9(5)v9(3)", "x(4)"]:
        digits = comp3_digits(picture)
        assert comp_length(picture, Usage.COMP_3) == -(-(digits + 1) // 2)


def test_binary_usages_are_a_fullword():
    assert comp_length("9(4)", Usage.COMP) == 4
    assert comp_length("9(18)", Usage.COMP_1) == 4
    assert comp_length("9", Usage.COMP_2) == 4


def test_unknown_usage_falls_back_to_picture_length():
    assert comp_length("9(6)", Usage.OTHER) == 6
    assert comp_length("x(3)", Usage.DISPLAY) == 3


def test_placeholder_without_picture_is_empty():
    assert field_length(Field(level=5, name="SLOT", repeat_count=4)) == 0


def test_group_length_sums_children_without_occurs():
    text = """
    01 REC.
       05 ARR OCCURS 3 TIMES.
          10 A PIC 9(4).
          10 B PIC 9(8) COMP-3.
       05 C PIC X(2) OCCURS 5 TIMES.
    """
    root = build_structure(parse_copybook(text)).root_fields[0]
    arr, c = root.children
    assert field_length(arr) == 9
    assert field_length(c) == 2
    assert field_length(root) == field_length(arr) + field_length(c) == 11
