import re

# Markdown code spans/fences may legitimately show HTML; they don't make a document HTML.
_FENCED_CODE = re.compile(r"(```|~~~).*?(\1|\Z)", re.DOTALL)
_INLINE_CODE = re.compile(r"`[^`\n]*`")

_DOCUMENT_MARKER = re.compile(r"<!doctype\s+html|<html[\s>]|<body[\s>]", re.IGNORECASE)

# headings, table rows, list items, blockquotes
_MARKDOWN_BLOCK = re.compile(
	r"^(#{1,6}\s+\S|\s*\|.*\|\s*$|\s*(?:[-*+]|\d+\.)\s+\S|\s*>\s)",
	re.MULTILINE,
)

_VOID_TAGS = {"br", "hr", "img"}
_KNOWN_TAGS = {
	"a", "article", "b", "blockquote", "code", "dd", "div", "dl", "dt", "em", "figure",
	"h1", "h2", "h3", "h4", "h5", "h6", "i", "li", "ol", "p", "pre", "section", "span",
	"strong", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
} | _VOID_TAGS
_OPEN_TAG = re.compile(r"<([a-zA-Z][a-zA-Z0-9]*)(\s[^<>]*)?/?>")


def is_likely_html(text: str) -> bool:
	"""
	Sniff whether text looks like an HTML document or fragment.
	This is a heuristic, not a parser: Markdown with a stray "<" stays Markdown,
	and so does Markdown that embeds inline tags such as <br> in a table cell.
	"""
	if not text or not text.strip():
		return False
	stripped = _INLINE_CODE.sub("", _FENCED_CODE.sub("", text))
	if _DOCUMENT_MARKER.search(stripped):
		return True
	if _MARKDOWN_BLOCK.search(stripped):
		return False
	lowered = stripped.lower()
	for m in _OPEN_TAG.finditer(stripped):
		name = m.group(1).lower()
		if name not in _KNOWN_TAGS:
			continue
		if name in _VOID_TAGS:
			return True
		if f"</{name}>" in lowered:
			return True
	return False
