"""Environment variables consulted for default compile options."""

from __future__ import annotations

import os

ENV_SNIPPET_EVAL_FRAMEWORK_VERSION = "SNIPPET_EVAL_FRAMEWORK_VERSION"
ENV_SNIPPET_EVAL_JSX = "SNIPPET_EVAL_JSX"
ENV_SNIPPET_EVAL_RUNTIME_MODULE = "SNIPPET_EVAL_RUNTIME_MODULE"

_TRUTHY = {"1", "true", "yes", "on"}


class SnippetEvalEnv:
	"""Typed accessors over `os.environ`."""

	def _get(self, key: str) -> str | None:
		value = os.environ.get(key)
		return value if value else None

	def _set(self, key: str, value: str | None) -> None:
		if value is None:
			os.environ.pop(key, None)
		else:
			os.environ[key] = value

	@property
	def framework_version(self) -> int:
		value = self._get(ENV_SNIPPET_EVAL_FRAMEWORK_VERSION)
		if value is None:
			return 3
		try:
			return int(value.split(".")[0])
		except ValueError:
			raise ValueError(
				f"{ENV_SNIPPET_EVAL_FRAMEWORK_VERSION} must be a version number, got {value!r}"
			) from None

	@framework_version.setter
	def framework_version(self, value: int | None) -> None:
		self._set(ENV_SNIPPET_EVAL_FRAMEWORK_VERSION, None if value is None else str(value))

	@property
	def jsx(self) -> bool:
		value = self._get(ENV_SNIPPET_EVAL_JSX)
		return value is not None and value.lower() in _TRUTHY

	@jsx.setter
	def jsx(self, value: bool | None) -> None:
		self._set(ENV_SNIPPET_EVAL_JSX, None if value is None else ("1" if value else "0"))

	@property
	def runtime_module(self) -> str:
		return self._get(ENV_SNIPPET_EVAL_RUNTIME_MODULE) or "vue"

	@runtime_module.setter
	def runtime_module(self, value: str | None) -> None:
		self._set(ENV_SNIPPET_EVAL_RUNTIME_MODULE, value)


env = SnippetEvalEnv()
