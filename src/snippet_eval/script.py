from __future__ import annotations

import logging

from tree_sitter import Node

from snippet_eval.capture import data_accessor, declared_names
from snippet_eval.constructor import rewrite_constructor
from snippet_eval.edits import Edit, apply_edits
from snippet_eval.imports import rewrite_import
from snippet_eval.options import CompileOptions
from snippet_eval.parser import SyntaxTree, parse

logger = logging.getLogger(__name__)


def collect_edits(tree: SyntaxTree, options: CompileOptions) -> list[Edit]:
	"""Import and constructor rewrites, positioned against the parsed text."""
	edits: list[Edit] = []
	stack: list[Node] = [tree.root]
	while stack:
		node = stack.pop()
		if node.type == "import_statement":
			edits.append(rewrite_import(tree, node, options.require_name))
			continue
		edit = rewrite_constructor(tree, node, options)
		if edit is not None:
			# the statement is replaced as a whole
			edits.append(edit)
			continue
		stack.extend(reversed(node.named_children))
	return edits


def rewrite_script(code: str, options: CompileOptions, *, capture: bool = False) -> str:
	"""Rewrite a script into a function body.

	With `capture`, every top-level binding is exposed through a trailing
	`data` accessor.
	"""
	tree = parse(code)
	edits = collect_edits(tree, options)
	result = apply_edits(code, edits)
	logger.debug("Applied %d edits to script", len(edits))
	if capture:
		names: list[str] = []
		for node in tree.statements:
			names.extend(declared_names(tree, node))
		if result and not result.endswith("\n"):
			# keep the accessor out of a trailing line comment
			result += "\n"
		result += data_accessor(names)
	return result
