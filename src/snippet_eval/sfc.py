"""
Single-file component handling.

A single-file component bundles `<template>`, `<script>` and `<style>` blocks.
`normalize_sfc_component` turns one into `ComponentParts` whose script is a
function body returning the component options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tree_sitter import Node

from snippet_eval.component import ComponentParts
from snippet_eval.constructor import (
	create_element_position,
	insert_create_element_function,
)
from snippet_eval.edits import Edit, apply_edits, apply_edits_in_range
from snippet_eval.imports import rewrite_import
from snippet_eval.options import CompileOptions
from snippet_eval.parser import SyntaxTree, parse

_BLOCK_TAG = re.compile(r"<(/?)(template|script|style)\b([^>]*)>", re.IGNORECASE)
_TEMPLATE_TAG = re.compile(r"<(/?)template\b[^>]*>", re.IGNORECASE)
_ATTRIBUTE = re.compile(
	r"""([^\s=/>]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+)))?"""
)
_LEADING_NOISE = re.compile(r"^(?:\s|<!--.*?-->)*", re.DOTALL)
_SFC_OPENER = re.compile(r"<(template|script|style)\b", re.IGNORECASE)
_TOP_LEVEL_SCRIPT = re.compile(
	r"^<script\b[^>]*>.*?^</script>", re.IGNORECASE | re.MULTILINE | re.DOTALL
)

# Wrappers whose first argument is the component options object
_OPTION_WRAPPERS = {"defineComponent", "Vue.extend"}


@dataclass(slots=True)
class SfcBlock:
	type: str
	content: str
	attrs: dict[str, str | bool] = field(default_factory=dict)
	start: int = 0
	end: int = 0

	@property
	def lang(self) -> str | None:
		lang = self.attrs.get("lang")
		return lang if isinstance(lang, str) else None


@dataclass(slots=True)
class SfcDescriptor:
	template: SfcBlock | None = None
	script: SfcBlock | None = None
	styles: list[SfcBlock] = field(default_factory=list)


@dataclass(slots=True)
class ScriptParts:
	"""A component script split around its default-exported options object."""

	preprocessing: str
	component: str
	postprocessing: str


def is_code_vue_sfc(code: str) -> bool:
	head = _LEADING_NOISE.sub("", code, count=1)
	if _SFC_OPENER.match(head):
		return True
	return _TOP_LEVEL_SCRIPT.search(code) is not None


def parse_attributes(raw: str) -> dict[str, str | bool]:
	attrs: dict[str, str | bool] = {}
	for match in _ATTRIBUTE.finditer(raw):
		name, double, single, bare = match.groups()
		if double is not None:
			attrs[name] = double
		elif single is not None:
			attrs[name] = single
		elif bare is not None:
			attrs[name] = bare
		else:
			attrs[name] = True
	return attrs


def _template_close(code: str, pos: int) -> re.Match[str] | None:
	"""The `</template>` balancing an opening tag that ends at `pos`."""
	depth = 1
	for match in _TEMPLATE_TAG.finditer(code, pos):
		if match.group(1):
			depth -= 1
			if depth == 0:
				return match
		elif not match.group(0).endswith("/>"):
			depth += 1
	return None


def parse_component(code: str) -> SfcDescriptor:
	descriptor = SfcDescriptor()
	pos = 0
	while True:
		opening = _BLOCK_TAG.search(code, pos)
		if opening is None:
			break
		if opening.group(1):
			# stray closing tag
			pos = opening.end()
			continue
		kind = opening.group(2).lower()
		raw_attrs = opening.group(3)
		if raw_attrs.rstrip().endswith("/"):
			block = SfcBlock(kind, "", parse_attributes(raw_attrs.rstrip()[:-1]))
			block.start = block.end = opening.end()
			pos = opening.end()
		else:
			if kind == "template":
				closing = _template_close(code, opening.end())
			else:
				closing = re.compile(rf"</{kind}\s*>", re.IGNORECASE).search(
					code, opening.end()
				)
			content_end = closing.start() if closing else len(code)
			block = SfcBlock(
				kind,
				code[opening.end() : content_end],
				parse_attributes(raw_attrs),
				opening.end(),
				content_end,
			)
			pos = closing.end() if closing else len(code)
		if kind == "template":
			if descriptor.template is None:
				descriptor.template = block
		elif kind == "script":
			if descriptor.script is None:
				descriptor.script = block
		else:
			descriptor.styles.append(block)
	return descriptor


def _default_export(tree: SyntaxTree) -> Node | None:
	for node in tree.statements:
		if node.type == "export_statement" and any(
			child.type == "default" for child in node.children
		):
			return node
	return None


def _options_object(tree: SyntaxTree, value: Node) -> Node | None:
	if value.type == "object":
		return value
	if value.type == "call_expression":
		callee = value.child_by_field_name("function")
		arguments = value.child_by_field_name("arguments")
		if callee is None or arguments is None or tree.text(callee) not in _OPTION_WRAPPERS:
			return None
		args = [a for a in arguments.named_children if a.type != "comment"]
		if args and args[0].type == "object":
			return args[0]
	return None


def parse_script_code(code: str, options: CompileOptions | None = None) -> ScriptParts:
	"""Split a component script into the code around its exported options.

	Imports become `require` calls. Without a default export the whole script is
	preprocessing and the component is empty. A default export that is not an
	options object is spread into the returned component.
	"""
	options = options or CompileOptions()
	tree = parse(code)
	edits: list[Edit] = [
		rewrite_import(tree, node, options.require_name)
		for node in tree.statements
		if node.type == "import_statement"
	]
	export = _default_export(tree)
	value = export.child_by_field_name("value") if export is not None else None
	if export is None or value is None:
		return ScriptParts(apply_edits(code, edits), "", "")

	export_start = tree.start(export)
	export_end = tree.end(export)
	preprocessing = apply_edits_in_range(code, edits, 0, export_start)
	postprocessing = apply_edits_in_range(code, edits, export_end, len(code))

	obj = _options_object(tree, value)
	if obj is None:
		return ScriptParts(preprocessing, f"...({tree.text(value)})", postprocessing)

	start = tree.start(obj) + 1
	end = tree.end(obj) - 1
	render_index = create_element_position(tree, obj, options)
	if render_index > 0:
		component = insert_create_element_function(
			code[start : render_index + 1], code[render_index + 1 : end]
		)
	else:
		component = code[start:end]
	return ScriptParts(preprocessing, component, postprocessing)


def assemble_script(parts: ScriptParts) -> str:
	return f"{parts.preprocessing};return {{{parts.component}}};{parts.postprocessing}"


def normalize_sfc_component(
	code: str, options: CompileOptions | None = None
) -> ComponentParts:
	descriptor = parse_component(code)
	script = descriptor.script.content.strip() if descriptor.script else ""
	if not script:
		script = "export default {}"
	styles = [block.content for block in descriptor.styles]
	return ComponentParts(
		script=assemble_script(parse_script_code(script, options)),
		template=descriptor.template.content if descriptor.template else None,
		style="\n".join(styles) if styles else None,
	)
