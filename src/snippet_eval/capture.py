"""Collect top-level bindings of a bare-mix script and expose them as `data`."""

from __future__ import annotations

from collections.abc import Iterable

from tree_sitter import Node

from snippet_eval.imports import local_names
from snippet_eval.parser import SyntaxTree

_DECLARATIONS = {"lexical_declaration", "variable_declaration"}
_FUNCTIONS = {"function_declaration", "generator_function_declaration"}


def pattern_names(tree: SyntaxTree, node: Node) -> list[str]:
	"""Names bound by a declarator target, destructuring included."""
	kind = node.type
	if kind in ("identifier", "shorthand_property_identifier_pattern"):
		return [tree.text(node)]
	if kind in ("object_pattern", "array_pattern", "rest_pattern"):
		names: list[str] = []
		for child in node.named_children:
			names.extend(pattern_names(tree, child))
		return names
	if kind == "pair_pattern":
		value = node.child_by_field_name("value")
		return pattern_names(tree, value) if value is not None else []
	if kind in ("object_assignment_pattern", "assignment_pattern"):
		left = node.child_by_field_name("left")
		return pattern_names(tree, left) if left is not None else []
	return []


def declared_names(tree: SyntaxTree, node: Node) -> list[str]:
	"""Names a single top-level statement declares, in source order."""
	kind = node.type
	if kind == "import_statement":
		return local_names(tree, node)
	if kind in _DECLARATIONS:
		names: list[str] = []
		for declarator in node.named_children:
			if declarator.type != "variable_declarator":
				continue
			target = declarator.child_by_field_name("name")
			if target is not None:
				names.extend(pattern_names(tree, target))
		return names
	if kind in _FUNCTIONS:
		name = node.child_by_field_name("name")
		return [tree.text(name)] if name is not None else []
	if kind == "export_statement":
		declaration = node.child_by_field_name("declaration")
		return declared_names(tree, declaration) if declaration is not None else []
	return []


def data_accessor(names: Iterable[str]) -> str:
	"""`;return {data:function(){return {a:a};}}` for the captured names."""
	entries = ",".join(f"{name}:{name}" for name in names)
	return f";return {{data:function(){{return {{{entries}}};}}}}"
