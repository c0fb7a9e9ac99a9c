"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and validation errors still render when it is not installed.  Without
Rich, markup tags are stripped and text goes to stderr verbatim.

Any user- or backend-supplied text interpolated into markup must pass
through :func:`escape` first.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from pumpfun_cli.exceptions import EnvironmentError

# Same tag grammar as ``rich.markup``.
_MARKUP_TAG = re.compile(r"(\\*)(\[[a-z#/@][^[]*?])")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape(text: object) -> str:
	"""Escape *text* so Rich renders it literally."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return _MARKUP_TAG.sub(r"\1\1\\\2", str(text))
	return rich_escape(str(text))


def strip_markup(text: str) -> str:
	"""Render markup as plain text: drop tags, unescape ``\\[``."""

	def _replace(match: re.Match[str]) -> str:
		backslashes, tag = match.groups()
		kept = "\\" * (len(backslashes) // 2)
		# An odd backslash count escapes the tag.
		return kept + tag if len(backslashes) % 2 else kept

	return _MARKUP_TAG.sub(_replace, text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
