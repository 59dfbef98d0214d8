"""Text edits computed against original positions and applied in one pass."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Edit:
	"""Replace `source[start:end]` with `text`. `start == end` inserts."""

	start: int
	end: int
	text: str

	@property
	def delta(self) -> int:
		return len(self.text) - (self.end - self.start)


def apply_edits(source: str, edits: Iterable[Edit]) -> str:
	"""Apply non-overlapping edits, left to right.

	Positions always refer to `source`, never to partially edited text.
	"""
	ordered = sorted(edits, key=lambda e: (e.start, e.end))
	out: list[str] = []
	cursor = 0
	for edit in ordered:
		if edit.start < cursor:
			raise ValueError(
				f"Overlapping edit at {edit.start}:{edit.end} (previous edit ends at {cursor})"
			)
		if edit.end < edit.start or edit.end > len(source):
			raise ValueError(f"Edit span {edit.start}:{edit.end} out of bounds")
		out.append(source[cursor : edit.start])
		out.append(edit.text)
		cursor = edit.end
	out.append(source[cursor:])
	return "".join(out)


def apply_edits_in_range(
	source: str, edits: Iterable[Edit], start: int, end: int
) -> str:
	"""Apply the edits lying inside `source[start:end]` and return that slice."""
	inside = [
		Edit(e.start - start, e.end - start, e.text)
		for e in edits
		if e.start >= start and e.end <= end
	]
	return apply_edits(source[start:end], inside)


def shift(offset: int, edit: Edit) -> int:
	"""Running offset after `edit` has been applied."""
	return offset + edit.delta
