"""
JavaScript parsing on top of tree-sitter.

tree-sitter reports byte offsets into the UTF-8 encoded source. The rest of the
package slices Python strings, so every position handed out by `SyntaxTree` is
a character offset into the original text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from snippet_eval.errors import ParseError

logger = logging.getLogger(__name__)


@cache
def js_language() -> Language:
	return Language(tree_sitter_javascript.language())


def _char_offsets(source: str) -> list[int] | None:
	"""Map every byte offset of the UTF-8 encoding to a character offset.

	Returns None for pure ASCII sources, where both offsets coincide.
	"""
	if source.isascii():
		return None
	offsets: list[int] = []
	for index, char in enumerate(source):
		offsets.extend([index] * len(char.encode("utf-8")))
	offsets.append(len(source))
	return offsets


@dataclass(slots=True)
class SyntaxTree:
	"""A parsed snippet together with the text it was parsed from."""

	source: str
	root: Node
	_offsets: list[int] | None

	def start(self, node: Node) -> int:
		if self._offsets is None:
			return node.start_byte
		return self._offsets[node.start_byte]

	def end(self, node: Node) -> int:
		if self._offsets is None:
			return node.end_byte
		return self._offsets[node.end_byte]

	def text(self, node: Node) -> str:
		return self.source[self.start(node) : self.end(node)]

	@property
	def statements(self) -> list[Node]:
		"""Top-level statements, comments excluded."""
		return [child for child in self.root.named_children if child.type != "comment"]

	def walk(self) -> Iterator[Node]:
		return walk(self.root)


def walk(node: Node) -> Iterator[Node]:
	"""Pre-order traversal of named nodes."""
	stack = [node]
	while stack:
		current = stack.pop()
		yield current
		stack.extend(reversed(current.named_children))


def _first_error(node: Node) -> Node | None:
	if node.is_error or node.is_missing:
		return node
	for child in node.children:
		if child.has_error or child.is_missing:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def _line_column(source: str, position: int) -> tuple[int, int]:
	line = source.count("\n", 0, position) + 1
	column = position - (source.rfind("\n", 0, position) + 1) + 1
	return line, column


def parse(code: str) -> SyntaxTree:
	"""Parse JavaScript (with JSX) into a `SyntaxTree`.

	Raises `ParseError` on the first syntax error found in the tree.
	"""
	parser = Parser(js_language())
	tree = parser.parse(code.encode("utf-8"))
	result = SyntaxTree(code, tree.root_node, _char_offsets(code))
	if tree.root_node.has_error:
		bad = _first_error(tree.root_node) or tree.root_node
		position = result.start(bad)
		line, column = _line_column(code, position)
		kind = f"missing {bad.type}" if bad.is_missing else "unexpected token"
		logger.debug("Parse failure at %d:%d", line, column)
		raise ParseError(
			f"Syntax error: {kind}", position=position, line=line, column=column
		)
	return result


def string_value(tree: SyntaxTree, node: Node) -> str:
	"""Unquoted content of a string literal node."""
	return tree.text(node)[1:-1]
