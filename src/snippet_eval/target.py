"""Transpilation target detection for snippets compiled inside a browser."""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

logger = logging.getLogger(__name__)

_BROWSER = re.compile(r"(opera|chrome|safari|firefox|msie|trident(?=/))/?\s*(\d+)", re.I)
_TRIDENT_RV = re.compile(r"\brv[ :]+(\d+)")
_CHROMIUM_FORK = re.compile(r"\b(OPR|Edge?)/(\d+)")
_VERSION = re.compile(r"version/(\d+)", re.I)


def is_browser_context() -> bool:
	"""Whether we run inside a browser runtime (Pyodide)."""
	return sys.platform == "emscripten"


def target_from_user_agent(user_agent: str) -> dict[str, int]:
	"""`{browser: major_version}` for a user agent string, `{}` if unknown."""
	match = _BROWSER.search(user_agent)
	if match is None:
		return {}
	browser, version = match.group(1).lower(), match.group(2)
	if browser == "trident":
		rv = _TRIDENT_RV.search(user_agent)
		return {"ie": int(rv.group(1))} if rv else {}
	if browser == "msie":
		return {"ie": int(version)}
	if browser == "chrome":
		fork = _CHROMIUM_FORK.search(user_agent)
		if fork is not None:
			name = "opera" if fork.group(1) == "OPR" else "edge"
			return {name: int(fork.group(2))}
	if browser == "safari":
		explicit = _VERSION.search(user_agent)
		if explicit is not None:
			version = explicit.group(1)
	return {browser: int(version)}


def get_target_from_browser() -> dict[str, int]:
	import js  # pyright: ignore[reportMissingImports]

	return target_from_user_agent(str(js.navigator.userAgent))


def probe_target() -> dict[str, Any]:
	"""Target fragment for the transpiler; empty outside a browser."""
	if not is_browser_context():
		return {}
	target = get_target_from_browser()
	logger.debug("Browser target: %s", target)
	return target
