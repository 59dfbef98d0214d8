"""Compile UI component snippets into evaluable function bodies."""

# Entry points
from snippet_eval.compiler import TemplateCompiler as TemplateCompiler
from snippet_eval.compiler import Transpiler as Transpiler
from snippet_eval.compiler import compile_for_eval as compile_for_eval
from snippet_eval.compiler import passthrough_transpiler as passthrough_transpiler
from snippet_eval.compiler import prepare_for_eval as prepare_for_eval

# Data
from snippet_eval.component import ComponentParts as ComponentParts
from snippet_eval.component import EvaluableComponent as EvaluableComponent

# Errors
from snippet_eval.errors import MissingCollaboratorError as MissingCollaboratorError
from snippet_eval.errors import ParseError as ParseError
from snippet_eval.errors import SnippetError as SnippetError

# Forms
from snippet_eval.forms import BareMixForm as BareMixForm
from snippet_eval.forms import ConstructorForm as ConstructorForm
from snippet_eval.forms import JsxForm as JsxForm
from snippet_eval.forms import SfcForm as SfcForm
from snippet_eval.forms import classify as classify
from snippet_eval.forms import find_template_start as find_template_start
from snippet_eval.forms import separate as separate

# Options
from snippet_eval.options import CompileOptions as CompileOptions

# Render modules
from snippet_eval.render_module import (
	get_evaluable_render_function_body as get_evaluable_render_function_body,
)

# Single-file components
from snippet_eval.sfc import is_code_vue_sfc as is_code_vue_sfc
from snippet_eval.sfc import normalize_sfc_component as normalize_sfc_component
from snippet_eval.sfc import parse_script_code as parse_script_code
