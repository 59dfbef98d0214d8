import pytest
from snippet_eval.edits import Edit, apply_edits, apply_edits_in_range, shift


def test_apply_edits_uses_original_positions():
	source = "aaa bbb ccc"
	edits = [Edit(8, 11, "C"), Edit(0, 3, "AAAAA")]
	assert apply_edits(source, edits) == "AAAAA bbb C"


def test_insertion():
	assert apply_edits("ab", [Edit(1, 1, "-")]) == "a-b"


def test_no_edits():
	assert apply_edits("unchanged", []) == "unchanged"


def test_overlapping_edits_raise():
	with pytest.raises(ValueError):
		apply_edits("abcdef", [Edit(0, 3, "x"), Edit(2, 4, "y")])


def test_out_of_bounds_raises():
	with pytest.raises(ValueError):
		apply_edits("abc", [Edit(1, 10, "x")])


def test_length_matches_sum_of_deltas():
	source = "0123456789"
	edits = [Edit(0, 2, "abcd"), Edit(5, 8, ""), Edit(9, 9, "zz")]
	result = apply_edits(source, edits)
	assert len(result) == len(source) + sum(e.delta for e in edits)


def test_apply_edits_in_range():
	source = "xx[abc]yy"
	edits = [Edit(0, 2, "X"), Edit(3, 4, "A")]
	assert apply_edits_in_range(source, edits, 2, 7) == "[Abc]"


def test_shift():
	assert shift(3, Edit(0, 4, "ab")) == 1
