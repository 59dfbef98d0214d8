from __future__ import annotations


class SnippetError(Exception):
	"""Base error for snippet compilation."""


class ParseError(SnippetError):
	"""The JavaScript parser rejected the snippet."""

	position: int
	line: int
	column: int

	def __init__(self, message: str, *, position: int, line: int, column: int):
		super().__init__(f"{message} ({line}:{column})")
		self.position = position
		self.line = line
		self.column = column


class MissingCollaboratorError(SnippetError):
	"""A pipeline step needs a collaborator that was not provided."""
