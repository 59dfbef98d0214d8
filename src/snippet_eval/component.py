from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class ComponentParts:
	"""Structural parts of a snippet: script, and optionally template and style."""

	script: str
	template: str | None = None
	style: str | None = None


@dataclass(slots=True)
class EvaluableComponent:
	"""A function body to evaluate, plus the style to inject alongside it."""

	script: str
	style: str | None = None

	def to_dict(self) -> dict[str, Any]:
		out: dict[str, Any] = {"script": self.script}
		if self.style is not None:
			out["style"] = self.style
		return out
