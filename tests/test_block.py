import copy

import pytest

from typetris_block import Block, BlockState, Cell, InvalidBlockText
from typetris_geometry import BoundingBox, Position
from typetris_words import WordDealer
from tests.helpers import ScriptedWords


def make_block(text):
    return Block.line(text, BlockState.INTERACTABLE, 0, 0)


def add_and_check(block, ch, changed, correct, expected):
    assert block.add_char(ch) is changed
    assert block.state is BlockState.INTERACTABLE
    assert block.is_correct() is correct
    assert block.input_text == expected


def delete_and_check(block, changed, correct, expected):
    assert block.delete_char() is changed
    assert block.is_correct() is correct
    assert block.input_text == expected


def test_line_builds_cells_and_bounding_box():
    b = Block.line("word", BlockState.FALLING, 3, 7)
    assert [c.position for c in b.cells] == [Position(x, 7) for x in range(3, 7)]
    assert b.bounding_box == BoundingBox(3, 7, 4, 1)
    assert b.assigned_text == "word"
    assert b.input_text == ""
    assert (b.x, b.y, b.width) == (3, 7, 4)
    assert b.position == Position(3, 7)


@pytest.mark.parametrize("text", ["", "café", "日本"])
def test_line_rejects_empty_or_non_ascii_text(text):
    with pytest.raises(InvalidBlockText):
        Block.line(text, BlockState.INTERACTABLE, 0, 0)


def test_cell_rejects_non_ascii():
    with pytest.raises(InvalidBlockText):
        Cell("é", Position(0, 0))


def test_invalid_chars_are_ignored():
    b = make_block("unicode")
    for ch in ".% \"0é":
        add_and_check(b, ch, False, False, "")
    add_and_check(b, "ab", False, False, "")


def test_single_letter_block():
    b = make_block("a")
    add_and_check(b, "a", True, True, "a")
    add_and_check(b, "b", False, True, "a")
    delete_and_check(b, True, False, "")
    add_and_check(b, "B", True, False, "B")


def test_wrong_letter_then_fix():
    b = make_block("a")
    add_and_check(b, "b", True, False, "b")
    add_and_check(b, "c", False, False, "b")
    delete_and_check(b, True, False, "")
    add_and_check(b, "a", True, True, "a")


def test_typing_is_case_sensitive_and_deletes_lifo():
    b = make_block("abc")
    add_and_check(b, "a", True, False, "a")
    add_and_check(b, "b", True, False, "ab")
    add_and_check(b, "C", True, False, "abC")
    add_and_check(b, "d", False, False, "abC")
    delete_and_check(b, True, False, "ab")
    add_and_check(b, "c", True, True, "abc")
    delete_and_check(b, True, False, "ab")
    delete_and_check(b, True, False, "a")
    delete_and_check(b, True, False, "")
    delete_and_check(b, False, False, "")


@pytest.mark.parametrize("state", [BlockState.FALLING, BlockState.SETTLED])
def test_only_interactable_blocks_accept_typing(state):
    original = Block.line("abc", state, 0, 0)
    b = copy.deepcopy(original)
    assert not b.add_char("a")
    assert not b.delete_char()
    assert b == original


def test_movable_requires_focus_and_correct_text():
    b = make_block("go")
    assert not b.is_movable()
    b.add_char("g"); b.add_char("o")
    assert b.is_movable()
    b.state = BlockState.FALLING
    assert b.is_correct()
    assert not b.is_movable()


def test_shift_moves_cells_and_box_together():
    b = Block.line("abc", BlockState.FALLING, 2, 2)
    b.shift(-1, 1)
    assert b.bounding_box == BoundingBox(1, 3, 3, 1)
    assert [c.position for c in b.cells] == [Position(1, 3), Position(2, 3), Position(3, 3)]


def test_intersects_checks_shared_cells():
    a = Block.line("abc", BlockState.SETTLED, 0, 5)
    assert a.intersects(Block.line("xy", BlockState.FALLING, 2, 5))
    assert not a.intersects(Block.line("xy", BlockState.FALLING, 3, 5))
    assert not a.intersects(Block.line("xy", BlockState.FALLING, 0, 4))


def test_state_sort_order_puts_settled_first():
    assert sorted([BlockState.INTERACTABLE, BlockState.SETTLED, BlockState.FALLING]) == [
        BlockState.SETTLED, BlockState.FALLING, BlockState.INTERACTABLE]


def test_random_places_word_on_row_zero():
    b = Block.random(8, ScriptedWords([("seven", 3)]))
    assert b.assigned_text == "seven"
    assert b.position == Position(3, 0)
    assert b.is_interactable()


@pytest.mark.parametrize("width", [1, 2, 3, 5, 8, 12, 40])
def test_random_blocks_fit_the_board(width):
    dealer = WordDealer(seed=width)
    for _ in range(50):
        b = Block.random(width, dealer)
        assert b.cells
        assert b.y == 0
        assert b.bounding_box.right <= width
        assert len({c.position for c in b.cells}) == len(b.cells)
        assert [c.position for c in b.cells] == sorted(c.position for c in b.cells)
        assert all(b.bounding_box.contains(c.position) for c in b.cells)
        assert all(c.input is None for c in b.cells)
