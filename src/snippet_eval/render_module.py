"""
Inline a compiled template module into a plain function body.

Transforms

	import { h as _h } from 'vue'

	export function render(_ctx, _cache, $props, $setup, $data, $options) {
		return _h('div', {}, [])
	}

into a body that can be passed to `new Function`

	var [_ctx, _cache, $props, $setup, $data, $options] = arguments
	const { h:_h } = require('vue')
	return _h('div', {}, [])
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from snippet_eval.imports import DEFAULT_REQUIRE, import_replacement, import_specifiers
from snippet_eval.parser import SyntaxTree, parse, string_value

logger = logging.getLogger(__name__)


def _runtime_require(
	tree: SyntaxTree, node: Node, runtime_module: str, require: str
) -> str:
	specifiers = import_specifiers(tree, node)
	bindings = ",".join(f"{imported}:{local}" for imported, local in specifiers.named)
	return f"const {{ {bindings} }} = {require}('{runtime_module}')"


def _exported_function(node: Node) -> Node | None:
	declaration = node.child_by_field_name("declaration")
	if declaration is None or declaration.type != "function_declaration":
		return None
	return declaration


def get_evaluable_render_function_body(
	code: str,
	runtime_module: str = "vue",
	require: str = DEFAULT_REQUIRE,
) -> str:
	tree = parse(code)
	imports = ""
	parameters = ""
	body = ""
	hoisted: list[str] = []
	found_render = False
	for node in tree.statements:
		if node.type == "import_statement":
			source = node.child_by_field_name("source")
			if source is not None and string_value(tree, source) == runtime_module:
				imports = _runtime_require(tree, node, runtime_module, require)
			else:
				hoisted.append(import_replacement(tree, node, require))
			continue
		if node.type == "export_statement":
			function = _exported_function(node)
			if function is not None:
				params = function.child_by_field_name("parameters")
				block = function.child_by_field_name("body")
				if params is not None:
					parameters = ", ".join(
						tree.text(p) for p in params.named_children if p.type != "comment"
					)
				if block is not None:
					body = tree.source[tree.start(block) + 1 : tree.end(block) - 1]
				found_render = True
				continue
		hoisted.append(tree.text(node))
	if not found_render:
		logger.warning("Compiled template has no exported render function")
	lines = [f"var [{parameters}] = arguments", imports, *hoisted, body]
	return "\n  " + "\n  ".join(lines)
