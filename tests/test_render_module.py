"""
Tests for inlining compiled template modules into function bodies.
"""

import logging

import pytest
from snippet_eval.errors import ParseError
from snippet_eval.render_module import get_evaluable_render_function_body


def test_spec_shaped_module():
	code = "import {h as _h} from 'vue'\nexport function render(ctx){return _h('div')}"
	assert get_evaluable_render_function_body(code) == (
		"\n  var [ctx] = arguments\n  const { h:_h } = require('vue')\n  return _h('div')"
	)


def test_compiler_output_with_hoisted_constants():
	code = (
		'import { toDisplayString as _toDisplayString, openBlock as _openBlock, '
		'createElementBlock as _createElementBlock } from "vue"\n'
		"\n"
		'const _hoisted_1 = { class: "greeting" }\n'
		"\n"
		"export function render(_ctx, _cache) {\n"
		'  return (_openBlock(), _createElementBlock("div", _hoisted_1, '
		"_toDisplayString(_ctx.msg), 1 /* TEXT */))\n"
		"}"
	)
	body = get_evaluable_render_function_body(code)
	lines = body.split("\n  ")
	assert lines[0] == ""
	assert lines[1] == "var [_ctx, _cache] = arguments"
	assert lines[2] == (
		"const { toDisplayString:_toDisplayString,openBlock:_openBlock,"
		"createElementBlock:_createElementBlock } = require('vue')"
	)
	assert lines[3] == 'const _hoisted_1 = { class: "greeting" }'
	assert body.endswith(
		'\n  return (_openBlock(), _createElementBlock("div", _hoisted_1, '
		"_toDisplayString(_ctx.msg), 1 /* TEXT */))\n"
	)


def test_other_imports_become_requires():
	code = (
		"import { h as _h } from 'vue'\n"
		"import Icon from './Icon'\n"
		"export function render() { return _h(Icon) }"
	)
	body = get_evaluable_render_function_body(code)
	assert "\n  const Icon = require('./Icon').default\n" in body


def test_custom_runtime_module():
	code = "import { h as _h } from '@vue/runtime-dom'\nexport function render(a, b) { return 1 }"
	body = get_evaluable_render_function_body(code, runtime_module="@vue/runtime-dom")
	assert body == (
		"\n  var [a, b] = arguments\n  const { h:_h } = require('@vue/runtime-dom')\n   return 1 "
	)


def test_missing_runtime_import():
	code = "export function render(ctx) {return 1}"
	assert get_evaluable_render_function_body(code) == (
		"\n  var [ctx] = arguments\n  \n  return 1"
	)


def test_missing_export_degrades_to_empty_body(caplog: pytest.LogCaptureFixture):
	code = "import { h as _h } from 'vue'"
	with caplog.at_level(logging.WARNING, logger="snippet_eval.render_module"):
		body = get_evaluable_render_function_body(code)
	assert body == "\n  var [] = arguments\n  const { h:_h } = require('vue')\n  "
	assert "no exported render function" in caplog.text


def test_malformed_module_raises():
	with pytest.raises(ParseError):
		get_evaluable_render_function_body("export function render( {")
