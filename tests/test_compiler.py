"""
Tests for the end-to-end snippet compilation pipeline.
"""

from collections.abc import Mapping
from typing import Any

import pytest
from snippet_eval import (
	CompileOptions,
	EvaluableComponent,
	MissingCollaboratorError,
	ParseError,
	compile_for_eval,
	passthrough_transpiler,
	prepare_for_eval,
)
from snippet_eval.compiler import assemble, transpile_options
from snippet_eval.parser import parse

RENDER_MODULE = (
	"import { toDisplayString as _toDisplayString } from 'vue'\n"
	"export function render(_ctx, _cache) { return _toDisplayString(_ctx.x) }"
)


class FakeTemplateCompiler:
	def __init__(self, output: str) -> None:
		self.output = output
		self.calls: list[str] = []

	def __call__(self, template: str) -> str:
		self.calls.append(template)
		return self.output


class RecordingTranspiler:
	def __init__(self) -> None:
		self.calls: list[tuple[str, dict[str, Any]]] = []

	def __call__(self, code: str, options: Mapping[str, Any]) -> str:
		self.calls.append((code, dict(options)))
		return f"/*t*/{code}"


def _no_target() -> dict[str, Any]:
	return {}


class TestWithoutTemplate:
	def test_constructor_snippet(self):
		result = compile_for_eval("new Vue({data(){return {x:1}}})", target_probe=_no_target)
		assert result == EvaluableComponent(script=";return {data(){return {x:1}}}")
		assert result.to_dict() == {"script": ";return {data(){return {x:1}}}"}

	def test_bare_script(self):
		result = compile_for_eval("const a = 1", target_probe=_no_target)
		assert result.script == "const a = 1\n;return {data:function(){return {a:a};}}"
		assert result.style is None

	def test_sfc_style_is_returned(self):
		code = "<script>export default {}</script>\n<style>.a{}</style>"
		result = compile_for_eval(code, target_probe=_no_target)
		assert result.script == ";return {};"
		assert result.style == ".a{}"
		assert result.to_dict() == {"script": ";return {};", "style": ".a{}"}


class TestWithTemplate:
	def test_module_generation_inlines_render(self):
		compiler = FakeTemplateCompiler(RENDER_MODULE)
		result = compile_for_eval(
			"const x = 1\n<p>{{ x }}</p>",
			template_compiler=compiler,
			target_probe=_no_target,
		)
		assert compiler.calls == ["<div><p>{{ x }}</p></div>"]
		render = (
			"\n  var [_ctx, _cache] = arguments"
			"\n  const { toDisplayString:_toDisplayString } = require('vue')"
			"\n   return _toDisplayString(_ctx.x) "
		)
		script = "const x = 1\n;return {data:function(){return {x:x};}}"
		assert result.script == assemble(script, render)
		assert result.script == (
			"\n    const comp = (function() {\n" + script + "\n})()"
			"\n    comp.render = function() {\n" + render + "\n}"
			"\n    return comp"
		)

	def test_legacy_generation_uses_function_body(self):
		compiler = FakeTemplateCompiler("with(this){return _c('p')}")
		result = compile_for_eval(
			"<p>hi</p>",
			CompileOptions(framework_version=2),
			template_compiler=compiler,
			target_probe=_no_target,
		)
		assert compiler.calls == ["<p>hi</p>"]
		assert "comp.render = function() {\nwith(this){return _c('p')}\n}" in result.script

	def test_sfc_template(self):
		compiler = FakeTemplateCompiler(RENDER_MODULE)
		code = "<template><b>{{ x }}</b></template>\n<script>export default { data() { return { x: 1 } } }</script>"
		result = compile_for_eval(code, template_compiler=compiler, target_probe=_no_target)
		assert compiler.calls == ["<div><b>{{ x }}</b></div>"]
		assert result.script.startswith(
			"\n    const comp = (function() {\n;return { data() { return { x: 1 } } };\n})()"
		)

	def test_script_ending_in_line_comment(self):
		compiler = FakeTemplateCompiler(RENDER_MODULE)
		code = "<template><p/></template>\n<script>\nexport default {}\nconsole.log(1) // done\n</script>"
		result = compile_for_eval(code, template_compiler=compiler, target_probe=_no_target)
		assert "console.log(1) // done\n})()" in result.script
		# the whole body must still parse as a function
		parse("function body() {" + result.script + "\n}")

	def test_render_ending_in_line_comment(self):
		compiler = FakeTemplateCompiler("return 1 // rendered")
		result = compile_for_eval(
			"<p>hi</p>",
			CompileOptions(framework_version=2),
			template_compiler=compiler,
			target_probe=_no_target,
		)
		assert result.script.endswith("return 1 // rendered\n}\n    return comp")
		parse("function body() {" + result.script + "\n}")

	def test_missing_template_compiler(self):
		with pytest.raises(MissingCollaboratorError):
			compile_for_eval("<p>hi</p>", target_probe=_no_target)

	def test_template_compiler_failure_propagates(self):
		def broken(template: str) -> str:
			raise RuntimeError("bad template")

		with pytest.raises(RuntimeError, match="bad template"):
			compile_for_eval("<p>hi</p>", template_compiler=broken, target_probe=_no_target)


class TestTranspilation:
	def test_transpiler_receives_merged_options(self):
		transpiler = RecordingTranspiler()
		options = CompileOptions(transform={"objectAssign": "Object.assign"})
		result = compile_for_eval(
			"new Vue({})",
			options,
			transpiler=transpiler,
			target_probe=lambda: {"chrome": 71},
		)
		assert transpiler.calls == [
			(";return {}", {"target": {"chrome": 71}, "objectAssign": "Object.assign"})
		]
		assert result.script == "/*t*/;return {}"

	def test_caller_options_override_target(self):
		options = CompileOptions(jsx=True, transform={"target": {"node": 18}})
		assert transpile_options(options, {"chrome": 71}) == {
			"target": {"node": 18},
			"jsx": True,
		}

	def test_transpiler_failure_propagates(self):
		def broken(code: str, options: Mapping[str, Any]) -> str:
			raise SyntaxError("nope")

		with pytest.raises(SyntaxError):
			compile_for_eval("new Vue({})", transpiler=broken, target_probe=_no_target)

	def test_passthrough(self):
		assert passthrough_transpiler("const a = 1", {}) == "const a = 1"


class TestFailures:
	def test_parse_error_propagates(self):
		with pytest.raises(ParseError):
			compile_for_eval("new Vue({ data( })", target_probe=_no_target)

	def test_prepare_keeps_template(self):
		parts = prepare_for_eval("const a = 1\n<p/>")
		assert parts.template == "<p/>"
