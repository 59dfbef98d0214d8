"""
Compile a component snippet into a function body for dynamic evaluation.

The statement transpiler and the template compiler are collaborators supplied
by the caller. The result is meant for `new Function(body)`:

	const comp = (function() {
	<script>
	})()
	comp.render = function() {
	<render body>
	}
	return comp

Both bodies sit on their own lines, so a trailing line comment in either one
cannot swallow the closing brace.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from snippet_eval.component import ComponentParts, EvaluableComponent
from snippet_eval.errors import MissingCollaboratorError
from snippet_eval.forms import separate
from snippet_eval.options import CompileOptions
from snippet_eval.render_module import get_evaluable_render_function_body
from snippet_eval.target import probe_target

logger = logging.getLogger(__name__)


class Transpiler(Protocol):
	def __call__(self, code: str, options: Mapping[str, Any]) -> str: ...


class TemplateCompiler(Protocol):
	def __call__(self, template: str) -> str: ...


TargetProbe = Callable[[], Mapping[str, Any]]


def passthrough_transpiler(code: str, options: Mapping[str, Any]) -> str:
	"""Transpiler for runtimes that evaluate modern syntax as-is."""
	return code


def prepare_for_eval(code: str, options: CompileOptions | None = None) -> ComponentParts:
	return separate(code, options or CompileOptions())


def transpile_options(
	options: CompileOptions, target: Mapping[str, Any]
) -> dict[str, Any]:
	merged: dict[str, Any] = {"target": dict(target)}
	if options.jsx:
		merged["jsx"] = True
	merged.update(options.transform)
	return merged


def compile_render_function(
	template: str, compiler: TemplateCompiler, options: CompileOptions
) -> str:
	if options.legacy:
		return compiler(template)
	return get_evaluable_render_function_body(
		compiler(f"<div>{template}</div>"),
		runtime_module=options.runtime_module,
		require=options.require_name,
	)


def assemble(script: str, render: str) -> str:
	return f"""
    const comp = (function() {{
{script}
}})()
    comp.render = function() {{
{render}
}}
    return comp"""


def compile_for_eval(
	code: str,
	options: CompileOptions | None = None,
	*,
	transpiler: Transpiler | None = None,
	template_compiler: TemplateCompiler | None = None,
	target_probe: TargetProbe | None = None,
) -> EvaluableComponent:
	"""Turn a snippet into an evaluable function body and its style.

	Parser, transpiler and template compiler failures propagate unchanged.
	"""
	options = options or CompileOptions()
	transpiler = transpiler or passthrough_transpiler
	probe = target_probe or probe_target

	parts = prepare_for_eval(code, options)
	script = transpiler(parts.script, transpile_options(options, probe()))

	if parts.template:
		if template_compiler is None:
			raise MissingCollaboratorError(
				"Snippet has a template but no template compiler was provided"
			)
		render = compile_render_function(parts.template, template_compiler, options)
		script = assemble(script, render)
		logger.debug("Inlined template render function")
	return EvaluableComponent(script=script, style=parts.style)
