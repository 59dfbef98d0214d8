"""
Rewrite ES module imports into runtime `require` calls.

	import a, { b, c as d } from 'm'

becomes

	const a = require('m').default;const { b, c: d } = require('m')

The replacement never contains a newline, so line numbers of the following
code are preserved.

The `require` function supplied at evaluation time must return module
namespace objects: the default export under `.default` and named exports as
properties. A namespace import (`import * as ns`) binds that object as a
whole. A resolver backed by plain CommonJS values has to wrap them, for
example as `{ default: value, ...value }`, or default imports come out
`undefined`.
"""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node

from snippet_eval.edits import Edit
from snippet_eval.parser import SyntaxTree

DEFAULT_REQUIRE = "require"


@dataclass(slots=True)
class ImportSpecifiers:
	"""Bindings introduced by one import declaration."""

	default: str | None
	namespace: str | None
	named: list[tuple[str, str]]
	"""(imported, local) pairs in source order."""

	def local_names(self) -> list[str]:
		names: list[str] = []
		if self.default:
			names.append(self.default)
		if self.namespace:
			names.append(self.namespace)
		names.extend(local for _, local in self.named)
		return names


@dataclass(slots=True)
class ImportRewrite:
	code: str
	offset: int


def import_source(tree: SyntaxTree, node: Node) -> str:
	"""The module specifier literal, quotes included."""
	source = node.child_by_field_name("source")
	if source is None:
		raise ValueError("import statement without a source")
	return tree.text(source)


def import_specifiers(tree: SyntaxTree, node: Node) -> ImportSpecifiers:
	specifiers = ImportSpecifiers(default=None, namespace=None, named=[])
	clause = next((c for c in node.named_children if c.type == "import_clause"), None)
	if clause is None:
		return specifiers
	for child in clause.named_children:
		if child.type == "identifier":
			specifiers.default = tree.text(child)
		elif child.type == "namespace_import":
			ident = next(c for c in child.named_children if c.type == "identifier")
			specifiers.namespace = tree.text(ident)
		elif child.type == "named_imports":
			for spec in child.named_children:
				if spec.type != "import_specifier":
					continue
				name = spec.child_by_field_name("name")
				alias = spec.child_by_field_name("alias")
				if name is None:
					continue
				imported = tree.text(name)
				local = tree.text(alias) if alias is not None else imported
				specifiers.named.append((imported, local))
	return specifiers


def local_names(tree: SyntaxTree, node: Node) -> list[str]:
	return import_specifiers(tree, node).local_names()


def _named_binding(imported: str, local: str) -> str:
	return imported if imported == local else f"{imported}: {local}"


def import_replacement(
	tree: SyntaxTree, node: Node, require: str = DEFAULT_REQUIRE
) -> str:
	module = import_source(tree, node)
	call = f"{require}({module})"
	specifiers = import_specifiers(tree, node)
	statements: list[str] = []
	if specifiers.namespace:
		statements.append(f"const {specifiers.namespace} = {call}")
	if specifiers.default:
		statements.append(f"const {specifiers.default} = {call}.default")
	if specifiers.named:
		bindings = ", ".join(_named_binding(i, l) for i, l in specifiers.named)
		statements.append(f"const {{ {bindings} }} = {call}")
	if not statements:
		# side-effect import
		statements.append(call)
	return ";".join(statements)


def rewrite_import(
	tree: SyntaxTree, node: Node, require: str = DEFAULT_REQUIRE
) -> Edit:
	text = import_replacement(tree, node, require)
	if tree.text(node).endswith(";"):
		text += ";"
	return Edit(tree.start(node), tree.end(node), text)


def transform_one_import(
	tree: SyntaxTree,
	node: Node,
	code: str,
	offset: int,
	require: str = DEFAULT_REQUIRE,
) -> ImportRewrite:
	"""Rewrite one import inside `code`, which may already have been edited.

	`node` positions refer to the text `tree` was parsed from; `offset` is the
	cumulative length change of every edit applied before `node`.
	"""
	edit = rewrite_import(tree, node, require)
	start = edit.start + offset
	end = edit.end + offset
	return ImportRewrite(
		code=code[:start] + edit.text + code[end:],
		offset=offset + edit.delta,
	)
