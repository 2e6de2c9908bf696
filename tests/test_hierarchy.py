from reclayout.copybook.hierarchy import build_structure
from reclayout.copybook.parser import Field, parse_copybook


def _names(fields):
    return [f.name for f in fields]


def test_same_level_closes_sibling_and_higher_level_nests():
    text = """
    01 A.
       05 B PIC X.
       05 C.
          10 D PIC 9.
       05 E PIC X(2).
    """
    structure = build_structure(parse_copybook(text))
    assert structure.name == "A"
    assert _names(structure.root_fields) == ["A"]
    root = structure.root_fields[0]
    assert _names(root.children) == ["B", "C", "E"]
    assert _names(root.children[1].children) == ["D"]
    assert root.children[0].children == ()


def test_multiple_roots_keep_source_order():
    text = "01 A.\n 05 A1 PIC X.\n01 B.\n 05 B1 PIC X.\n 05 B2 PIC X."
    structure = build_structure(parse_copybook(text))
    assert structure.name == "A"
    assert _names(structure.root_fields) == ["A", "B"]
    assert _names(structure.root_fields[1].children) == ["B1", "B2"]


def test_irregular_levels_attach_to_nearest_lower_level():
    text = "01 A.\n 05 B PIC X.\n 03 C PIC X."
    structure = build_structure(parse_copybook(text))
    assert _names(structure.root_fields[0].children) == ["B", "C"]


def test_name_comes_from_outermost_root_level():
    text = "05 X.\n 10 Y PIC X.\n03 Z PIC X."
    structure = build_structure(parse_copybook(text))
    assert _names(structure.root_fields) == ["X", "Z"]
    assert structure.name == "Z"


def test_node_count_matches_parsed_fields():
    text = """
    01 REC.
       05 K.
          10 K1 PIC 9(4).
          10 K2 PIC X(2).
       05 T OCCURS 3 TIMES.
          10 T1 PIC X.
          10 T2.
             15 T21 PIC 9 COMP-3.
       05 Z PIC X.
    """
    fields = parse_copybook(text)
    structure = build_structure(fields)
    assert structure.field_count == len(fields) == 9
    assert _names(structure.iter_fields()) == _names(fields)


def test_empty_input_gives_empty_structure():
    structure = build_structure([])
    assert structure.name == ""
    assert structure.root_fields == ()


def test_input_fields_are_not_mutated():
    parent = Field(level=1, name="P")
    child = Field(level=5, name="C", picture="X")
    structure = build_structure([parent, child])
    assert parent.children == ()
    assert structure.root_fields[0].children == (child,)
