"""
Detect the authoring form of a snippet and split it into component parts.

Forms are tried in priority order, first match wins:

1. single-file component (`<template>` / `<script>` / `<style>` blocks)
2. constructor call (`new Vue({...})`)
3. JSX default-export object, when JSX mode is on
4. bare mix: top-level script followed by trailing markup
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TypeAlias

from snippet_eval.component import ComponentParts
from snippet_eval.options import CompileOptions
from snippet_eval.script import rewrite_script
from snippet_eval.sfc import (
	assemble_script,
	is_code_vue_sfc,
	normalize_sfc_component,
	parse_script_code,
)

logger = logging.getLogger(__name__)

_LEADING_TAG = re.compile(r"\s*<")
_NEWLINE_TAG = re.compile(r"\n[\t ]*<")


@dataclass(slots=True)
class SfcForm:
	code: str


@dataclass(slots=True)
class ConstructorForm:
	script: str


@dataclass(slots=True)
class JsxForm:
	script: str


@dataclass(slots=True)
class BareMixForm:
	script: str
	template: str | None


SnippetForm: TypeAlias = SfcForm | ConstructorForm | JsxForm | BareMixForm


def find_template_start(code: str) -> int | None:
	"""Where trailing markup begins in a bare-mix snippet.

	Position 0 when the snippet starts with a tag, otherwise the `<` of the
	first line that starts with one. Heuristic: a line inside a multi-line
	string or a `<` comparison continued on a new line also counts as markup.
	"""
	if _LEADING_TAG.match(code):
		return 0
	match = _NEWLINE_TAG.search(code)
	if match is None:
		return None
	return match.end() - 1


def has_constructor_call(code: str, name: str = "Vue") -> bool:
	return re.search(rf"\bnew\s+{re.escape(name)}\s*\(", code) is not None


def classify(code: str, options: CompileOptions | None = None) -> SnippetForm:
	options = options or CompileOptions()
	if is_code_vue_sfc(code):
		return SfcForm(code)
	if has_constructor_call(code, options.constructor_name):
		return ConstructorForm(code)
	if options.jsx:
		return JsxForm(code)
	limit = find_template_start(code)
	if limit is None:
		return BareMixForm(code, None)
	return BareMixForm(code[:limit], code[limit:])


def separate(code: str, options: CompileOptions | None = None) -> ComponentParts:
	"""Classify `code` and return its parts with the script ready to evaluate."""
	options = options or CompileOptions()
	form = classify(code, options)
	logger.debug("Detected %s snippet", type(form).__name__)
	if isinstance(form, SfcForm):
		return normalize_sfc_component(form.code, options)
	if isinstance(form, JsxForm):
		return ComponentParts(assemble_script(parse_script_code(form.script, options)))
	if isinstance(form, ConstructorForm):
		return ComponentParts(rewrite_script(form.script, options))
	return ComponentParts(
		rewrite_script(form.script, options, capture=True),
		template=form.template,
	)
