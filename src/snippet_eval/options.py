from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from snippet_eval.env import env


def _default_version() -> int:
	return env.framework_version


def _default_jsx() -> bool:
	return env.jsx


def _default_runtime_module() -> str:
	return env.runtime_module


@dataclass
class CompileOptions:
	"""
	Options for turning a snippet into an evaluable function body.

	Defaults for `framework_version`, `jsx` and `runtime_module` come from the
	`SNIPPET_EVAL_*` environment variables.
	"""

	jsx: bool = field(default_factory=_default_jsx)
	"""Treat non-SFC snippets as a JSX default-export object."""

	framework_version: int = field(default_factory=_default_version)
	"""Major version of the component framework. Below 3, render functions get a
	`this.$createElement` helper and templates compile to a bare function body."""

	constructor_name: str = "Vue"
	"""Identifier of the component constructor, as in `new Vue({...})`."""

	runtime_module: str = field(default_factory=_default_runtime_module)
	"""Module the compiled template imports its helpers from."""

	require_name: str = "require"
	"""Runtime resolver that replaces `import` declarations."""

	transform: dict[str, Any] = field(default_factory=dict)
	"""Extra options passed through to the statement transpiler."""

	@property
	def legacy(self) -> bool:
		"""Whether the framework predates module-emitting template compilation."""
		return self.framework_version < 3
