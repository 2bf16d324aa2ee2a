import pytest

from striptrease.exceptions import MalformedAnnotationError
from striptrease.models import AnnotationBlock, StripPolicy
from striptrease.parser.annotation_stripper import (
    excise_ranges,
    extract_support_values,
    find_annotation_blocks,
    removal_ranges,
    strip_annotations,
)

KEEP = StripPolicy.KEEP_SUPPORT_VALUE
REMOVE_ALL = StripPolicy.REMOVE_ALL


def test_posterior_value_replaces_block():
    assert strip_annotations("[&posterior=0.97,height=1.2]", KEEP) == "0.97"


def test_posterior_value_kept_in_place():
    tree = "(A:1.0,B[&posterior=0.88]:2.0);"
    assert strip_annotations(tree, KEEP) == "(A:1.0,B0.88:2.0);"


def test_remove_all_drops_block_with_brackets():
    tree = "(A:1.0,B[&posterior=0.88]:2.0);"
    assert strip_annotations(tree, REMOVE_ALL) == "(A:1.0,B:2.0);"


def test_label_fallback():
    assert strip_annotations("(A,B)[&label=85];", KEEP) == "(A,B)85;"


def test_block_without_support_key_is_removed():
    assert strip_annotations("(A[&someflag=true],B);", KEEP) == "(A,B);"


def test_posterior_checked_before_label():
    assert strip_annotations("(A,B)[&label=50,posterior=0.9];", KEEP) == "(A,B)0.9;"


def test_empty_posterior_value_does_not_fall_back_to_label():
    assert strip_annotations("(A,B)[&posterior=NaN,label=85];", KEEP) == "(A,B);"


def test_key_match_ignores_word_boundaries():
    assert strip_annotations("(A,B)[&mylabel=42];", KEEP) == "(A,B)42;"


def test_beast_node_annotation():
    tree = (
        "((A:1.0,B:2.0)[&height_95%_HPD={0.19508017007579698,0.35535530647436653},"
        "posterior=1.0]:0.5,C:1.5);"
    )
    assert strip_annotations(tree, KEEP) == "((A:1.0,B:2.0)1.0:0.5,C:1.5);"
    assert strip_annotations(tree, REMOVE_ALL) == "((A:1.0,B:2.0):0.5,C:1.5);"


def test_multiple_blocks():
    tree = "((A[&label=1]:1,B[&x=2]:1)[&label=99]:1,C[&posterior=0.5]:2);"
    assert strip_annotations(tree, KEEP) == "((A1:1,B:1)99:1,C0.5:2);"
    assert strip_annotations(tree, REMOVE_ALL) == "((A:1,B:1):1,C:2);"


def test_block_closing_at_final_character_is_stripped():
    assert strip_annotations("(A,B)[&label=85]", KEEP) == "(A,B)85"
    assert strip_annotations("(A,B)[&label=85]", REMOVE_ALL) == "(A,B)"


@pytest.mark.parametrize(
    "tree",
    [
        "(A:1.0,B:2.0);",
        "((A,B)[&posterior=1.0],C[&label=3]);",
        "[&R]((A,B),C);",
        "(A[&x=1,y={2,3}]:0.1,B:0.2);",
    ],
)
def test_remove_all_is_idempotent(tree):
    once = strip_annotations(tree, REMOVE_ALL)
    assert "[" not in once and "]" not in once
    assert strip_annotations(once, REMOVE_ALL) == once


def test_tree_without_annotations_is_unchanged():
    tree = "((A:0.1,B:0.2)90:0.3,C:0.4);"
    assert strip_annotations(tree, KEEP) == tree
    assert strip_annotations(tree, REMOVE_ALL) == tree


def test_unclosed_block_is_left_verbatim():
    tree = "(A,B[&posterior=0.5);"
    assert strip_annotations(tree, KEEP) == tree
    assert strip_annotations(tree, REMOVE_ALL) == tree


def test_stray_closing_bracket_is_plain_text():
    assert strip_annotations("(A,B]);", REMOVE_ALL) == "(A,B]);"


def test_first_closing_bracket_ends_block():
    assert strip_annotations("(A[x[y]z],B);", REMOVE_ALL) == "(Az],B);"


@pytest.mark.parametrize(
    "tree, offset",
    [
        ("(A[x[y]z],B);", 4),
        ("(A,B]);", 4),
        ("(A[&x,B);", 2),
    ],
)
def test_strict_mode_rejects_malformed_brackets(tree, offset):
    with pytest.raises(MalformedAnnotationError) as excinfo:
        strip_annotations(tree, REMOVE_ALL, strict=True)
    assert excinfo.value.offset == offset


def test_strict_mode_accepts_balanced_brackets():
    tree = "(A[&label=1],B);"
    assert strip_annotations(tree, KEEP, strict=True) == "(A1,B);"


def test_find_annotation_blocks():
    blocks = find_annotation_blocks("(A[&a=1],B[&label=2]);")
    assert blocks == [
        AnnotationBlock(start=2, end=7, text="[&a=1]"),
        AnnotationBlock(start=10, end=19, text="[&label=2]"),
    ]


def test_removal_ranges_around_support_value():
    block = AnnotationBlock(start=3, end=14, text="[&label=850]")
    assert block.support_span == (8, 11)
    assert removal_ranges(block, KEEP) == [(3, 11), (14, 15)]
    assert removal_ranges(block, REMOVE_ALL) == [(3, 15)]


def test_excise_ranges():
    assert excise_ranges("abcdef", [(4, 5), (0, 2)]) == "cdf"
    assert excise_ranges("abcdef", [(1, 4), (2, 5)]) == "af"
    assert excise_ranges("abcdef", []) == "abcdef"


def test_extract_support_values():
    tree = "(A[&posterior=0.9],B[&label=7],C[&x=1]);"
    assert extract_support_values(tree) == ["0.9", "7", None]
