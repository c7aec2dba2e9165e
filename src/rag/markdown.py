import re

from markdownify import MarkdownConverter, ATX

_BLANK_RUNS = re.compile(r"\n{3,}")


class _WikiMarkdownConverter(MarkdownConverter):
	# drop non-content elements entirely, body included
	def convert_script(self, el, text, *args, **kwargs):
		return ""

	def convert_style(self, el, text, *args, **kwargs):
		return ""


class HTML2MDConverter:
	"""
	HTML to Markdown conversion used before documents are uploaded.
	Build once and reuse; conversion holds no per-call state.
	"""

	def __init__(self) -> None:
		self._conv = _WikiMarkdownConverter(
			heading_style=ATX,
			bullets="-",
			escape_underscores=False,
		)

	def convert_string(self, html: str) -> str:
		md = self._conv.convert(html)
		return _BLANK_RUNS.sub("\n\n", md).strip()
