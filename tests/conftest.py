import pytest
from snippet_eval.env import (
	ENV_SNIPPET_EVAL_FRAMEWORK_VERSION,
	ENV_SNIPPET_EVAL_JSX,
	ENV_SNIPPET_EVAL_RUNTIME_MODULE,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	for key in (
		ENV_SNIPPET_EVAL_FRAMEWORK_VERSION,
		ENV_SNIPPET_EVAL_JSX,
		ENV_SNIPPET_EVAL_RUNTIME_MODULE,
	):
		monkeypatch.delenv(key, raising=False)
