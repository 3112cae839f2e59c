from typing import Any, Mapping
import re
from .tags import TTag, TBlockTag, Inline, Voids, TagCategory, category
from .attributes import render
from .errors import BeginNotSupported

# --
# Static rendering of elements, from a tag name, content and attributes. The
# output layout depends only on the tag's category:
#
# - block tags put their content on its own line, `<div>\n…\n</div>`
# - inline tags wrap their content, `<span>…</span>`
# - void tags have no content nor end tag, `<img>`

HTML_ENCODED = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})

TAttributesLike = Mapping[Any, Any] | None


def encode(text: str) -> str:
	"""Encodes text so that it can be used as element content."""
	return text.translate(HTML_ENCODED)


def begin(tag: TBlockTag, attributes: TAttributesLike = None) -> str:
	if category(tag) in (TagCategory.Inline, TagCategory.Void):
		raise BeginNotSupported(type(tag))
	return f"<{tag.value}{render(attributes or {})}>\n"


def end(tag: TBlockTag) -> str:
	if category(tag) in (TagCategory.Inline, TagCategory.Void):
		raise BeginNotSupported(type(tag))
	return f"\n</{tag.value}>"


def inline(
	tag: Inline,
	content: str = "",
	attributes: TAttributesLike = None,
	encode: bool = False,
) -> str:
	text = content.translate(HTML_ENCODED) if encode else content
	return f"<{tag.value}{render(attributes or {})}>{text}</{tag.value}>"


def void(tag: Voids, attributes: TAttributesLike = None) -> str:
	return f"<{tag.value}{render(attributes or {})}>"


def element(
	tag: TTag,
	content: str = "",
	attributes: TAttributesLike = None,
	encode: bool = False,
) -> str:
	"""Renders a complete element, dispatching on the category of the tag."""
	kind = category(tag)
	if kind is TagCategory.Void:
		return void(tag, attributes)  # type: ignore[arg-type]
	elif kind is TagCategory.Inline:
		return inline(tag, content, attributes, encode)  # type: ignore[arg-type]
	text = content.translate(HTML_ENCODED) if encode else content
	attrs = render(attributes or {})
	if text:
		return f"<{tag.value}{attrs}>\n{text}\n</{tag.value}>"
	else:
		return f"<{tag.value}{attrs}>\n</{tag.value}>"


def template(layout: str, tokens: Mapping[str, str]) -> str:
	"""Renders the `layout` line by line, replacing each `{token}` with its
	value. Lines that render empty are dropped. Substituted values are not
	scanned for tokens."""
	if not tokens:
		return "\n".join(_ for _ in layout.split("\n") if _.strip())
	# Longest tokens first, so that a token prefixing another one never wins
	pattern = re.compile(
		"|".join(re.escape(_) for _ in sorted(tokens, key=len, reverse=True))
	)
	lines: list[str] = []
	for line in layout.split("\n"):
		line = pattern.sub(lambda match: tokens[match.group(0)], line)
		if line.strip():
			lines.append(line)
	return "\n".join(lines)


# EOF
