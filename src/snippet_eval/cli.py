"""
Command-line interface for snippet-eval.
Compiles component snippets into evaluable function bodies.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import importlib
import json
import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from snippet_eval.compiler import compile_for_eval
from snippet_eval.errors import SnippetError
from snippet_eval.forms import BareMixForm, classify, separate
from snippet_eval.options import CompileOptions

cli = typer.Typer(
	name="snippet-eval",
	help="Compile UI component snippets into evaluable function bodies",
	no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def load_target(target: str) -> Any:
	"""Load `module.path:attr`."""
	module_name, sep, attr = target.partition(":")
	if not sep or not module_name or not attr:
		raise typer.BadParameter(f"Expected 'module:attribute', got {target!r}")
	module = importlib.import_module(module_name)
	try:
		return getattr(module, attr)
	except AttributeError:
		raise typer.BadParameter(f"{module_name} has no attribute {attr!r}") from None


def _read_source(path: str) -> str:
	if path == "-":
		return sys.stdin.read()
	with open(path, encoding="utf-8") as f:
		return f.read()


def _configure_logging(verbose: bool) -> None:
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(message)s",
		handlers=[RichHandler(console=err_console, show_path=False)],
		force=True,
	)


def _options(
	jsx: bool | None,
	framework_version: int | None,
	constructor: str | None,
	runtime_module: str | None,
) -> CompileOptions:
	options = CompileOptions()
	if jsx is not None:
		options.jsx = jsx
	if framework_version is not None:
		options.framework_version = framework_version
	if constructor:
		options.constructor_name = constructor
	if runtime_module:
		options.runtime_module = runtime_module
	return options


@cli.command("compile")
def compile_cmd(
	source: str = typer.Argument(..., help="Snippet file, or '-' for stdin"),
	jsx: bool | None = typer.Option(None, "--jsx/--no-jsx", help="JSX mode"),
	framework_version: int | None = typer.Option(
		None, "--framework-version", help="Major version of the component framework"
	),
	constructor: str | None = typer.Option(
		None, "--constructor", help="Component constructor identifier"
	),
	runtime_module: str | None = typer.Option(
		None, "--runtime-module", help="Module compiled templates import from"
	),
	template_compiler: str | None = typer.Option(
		None, "--template-compiler", help="Template compiler as 'module:attr'"
	),
	transpiler: str | None = typer.Option(
		None, "--transpiler", help="Statement transpiler as 'module:attr'"
	),
	as_json: bool = typer.Option(False, "--json", help="Print {script, style} as JSON"),
	verbose: bool = typer.Option(False, "--verbose", "-v"),
):
	"""Compile a snippet into an evaluable function body."""
	_configure_logging(verbose)
	options = _options(jsx, framework_version, constructor, runtime_module)
	try:
		result = compile_for_eval(
			_read_source(source),
			options,
			transpiler=load_target(transpiler) if transpiler else None,
			template_compiler=load_target(template_compiler) if template_compiler else None,
		)
	except SnippetError as e:
		err_console.print(f"[red]Error:[/red] {e}")
		raise typer.Exit(1) from None
	if as_json:
		typer.echo(json.dumps(result.to_dict(), indent=2))
	else:
		typer.echo(result.script)


@cli.command("detect")
def detect_cmd(
	source: str = typer.Argument(..., help="Snippet file, or '-' for stdin"),
	jsx: bool | None = typer.Option(None, "--jsx/--no-jsx", help="JSX mode"),
	framework_version: int | None = typer.Option(None, "--framework-version"),
	constructor: str | None = typer.Option(None, "--constructor"),
	verbose: bool = typer.Option(False, "--verbose", "-v"),
):
	"""Show the detected snippet form and its parts."""
	_configure_logging(verbose)
	options = _options(jsx, framework_version, constructor, None)
	code = _read_source(source)
	try:
		form = classify(code, options)
		parts = separate(code, options)
	except SnippetError as e:
		err_console.print(f"[red]Error:[/red] {e}")
		raise typer.Exit(1) from None
	console.print(f"[bold]form:[/bold] {type(form).__name__}")
	if isinstance(form, BareMixForm) and form.template is not None:
		console.print(f"[bold]template starts at:[/bold] {len(form.script)}")
	console.rule("script")
	console.print(parts.script, markup=False, highlight=False)
	if parts.template is not None:
		console.rule("template")
		console.print(parts.template, markup=False, highlight=False)
	if parts.style is not None:
		console.rule("style")
		console.print(parts.style, markup=False, highlight=False)


def main():
	cli()


if __name__ == "__main__":
	main()
