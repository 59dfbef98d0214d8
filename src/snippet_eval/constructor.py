"""
Rewrite `new Vue({...})` statements into `return {...}`.

The options object becomes the value returned by the evaluated function body.
Legacy framework versions need `h` in scope for JSX render functions, so a
`this.$createElement` helper is spliced in at the top of `render`.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from snippet_eval.edits import Edit
from snippet_eval.options import CompileOptions
from snippet_eval.parser import SyntaxTree

logger = logging.getLogger(__name__)

JSX_ADDON = ";const h = this.$createElement;"
JSX_ADDON_LENGTH = len(JSX_ADDON)

_FUNCTION_VALUES = {"function_expression", "function", "arrow_function"}


def insert_create_element_function(before: str, after: str) -> str:
	return f"{before}{JSX_ADDON}{after}"


def constructor_call(tree: SyntaxTree, node: Node, name: str) -> Node | None:
	"""The `new <name>(...)` expression of an expression statement, if any."""
	if node.type != "expression_statement" or not node.named_children:
		return None
	expression = node.named_children[0]
	if expression.type != "new_expression":
		return None
	callee = expression.child_by_field_name("constructor")
	if callee is None or callee.type != "identifier" or tree.text(callee) != name:
		return None
	return expression


def is_constructor_call(tree: SyntaxTree, node: Node, name: str = "Vue") -> bool:
	return constructor_call(tree, node, name) is not None


def options_argument(expression: Node) -> Node | None:
	arguments = expression.child_by_field_name("arguments")
	if arguments is None:
		return None
	args = [a for a in arguments.named_children if a.type != "comment"]
	return args[0] if args else None


def _property_name(tree: SyntaxTree, node: Node) -> str | None:
	key = node.child_by_field_name("key") or node.child_by_field_name("name")
	if key is None:
		return None
	text = tree.text(key)
	if key.type == "string":
		return text[1:-1]
	return text


def _render_function(tree: SyntaxTree, options: Node | None) -> Node | None:
	"""The method or function value of the `render` option."""
	if options is None or options.type != "object":
		return None
	for prop in options.named_children:
		if prop.type not in ("pair", "method_definition"):
			continue
		if _property_name(tree, prop) != "render":
			continue
		if prop.type == "method_definition":
			return prop
		value = prop.child_by_field_name("value")
		if value is None or value.type not in _FUNCTION_VALUES:
			return None
		return value
	return None


def get_render_function_start(tree: SyntaxTree, options: Node | None) -> int:
	"""Position of the `{` opening the body of the `render` option, or -1."""
	function = _render_function(tree, options)
	if function is None:
		return -1
	body = function.child_by_field_name("body")
	if body is None or body.type != "statement_block":
		return -1
	return tree.start(body)


def render_declares_h(tree: SyntaxTree, options: Node | None) -> bool:
	"""Whether the first parameter of the `render` option is already `h`."""
	function = _render_function(tree, options)
	if function is None:
		return False
	single = function.child_by_field_name("parameter")
	if single is not None:
		return tree.text(single) == "h"
	params = function.child_by_field_name("parameters")
	if params is None:
		return False
	first = next((p for p in params.named_children if p.type != "comment"), None)
	if first is not None and first.type == "assignment_pattern":
		first = first.child_by_field_name("left")
	return first is not None and tree.text(first) == "h"


def create_element_position(
	tree: SyntaxTree, options_node: Node | None, options: CompileOptions
) -> int:
	"""Where the `$createElement` helper goes, or -1 when it is not needed."""
	if not options.legacy or render_declares_h(tree, options_node):
		return -1
	return get_render_function_start(tree, options_node)


def rewrite_constructor(
	tree: SyntaxTree, node: Node, options: CompileOptions
) -> Edit | None:
	"""Edit replacing a constructor statement with `;return <options>`.

	Returns None when `node` is not a constructor statement. A call without an
	options argument degrades to a bare `;return `.
	"""
	expression = constructor_call(tree, node, options.constructor_name)
	if expression is None:
		return None
	source = tree.source
	options_node = options_argument(expression)
	if options_node is None:
		logger.warning(
			"new %s() without an options argument; emitting an empty return",
			options.constructor_name,
		)
		operand = ""
	else:
		start = tree.start(options_node)
		end = tree.end(options_node)
		render_index = create_element_position(tree, options_node, options)
		if render_index > 0:
			operand = insert_create_element_function(
				source[start : render_index + 1], source[render_index + 1 : end]
			)
		else:
			operand = source[start:end]
	text = ";return " + operand
	if tree.text(node).endswith(";"):
		text += ";"
	return Edit(tree.start(node), tree.end(node), text)
