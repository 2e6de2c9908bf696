import pytest

from reclayout.copybook.guard import check_unsupported_features
from reclayout.errors import UnsupportedFeature


@pytest.mark.parametrize(
    "text",
    [
        "01 test redefines something.",
        "01 A.\n   05 B PIC X(4) REDEFINES A.",
        "* old layout ReDeFiNeS the header\n01 A PIC X.",
    ],
)
def test_guard_rejects_redefines_anywhere(text):
    with pytest.raises(UnsupportedFeature) as info:
        check_unsupported_features(text)
    assert info.value.feature == "redefines"
    assert "redefines not implemented" in str(info.value)


def test_guard_rejects_variable_length_records():
    with pytest.raises(UnsupportedFeature) as info:
        check_unsupported_features("FD CUSTFILE RECORD IS Varying In Size.")
    assert info.value.feature == "variable length"

    with pytest.raises(UnsupportedFeature):
        check_unsupported_features("05 ITEMS PIC X(4) OCCURS 1 TO 10 TIMES DEPENDING ON N.")


def test_guard_reports_line_of_first_match():
    text = "01 REC.\n   05 A PIC X(4).\n   05 B REDEFINES A PIC 9(4)."
    with pytest.raises(UnsupportedFeature) as info:
        check_unsupported_features(text)
    assert info.value.line_number == 3
    assert info.value.text == "05 B REDEFINES A PIC 9(4)."
    assert str(info.value).startswith("line 3: redefines not implemented")


def test_guard_accepts_plain_copybook():
    text = "01 REC.\n   05 A PIC X(4) OCCURS 3 TIMES.\n   05 B PIC 9(8) COMP-3."
    assert check_unsupported_features(text) is None
