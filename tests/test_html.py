import pytest
from htmltag import html
from htmltag.errors import BeginNotSupported
from htmltag.tags import Block, Inline, Lists, Root, Table, Voids, TagCategory, category, named


def test_category():
	assert category(Block.Div) is TagCategory.Block
	assert category(Inline.Span) is TagCategory.Inline
	assert category(Voids.Img) is TagCategory.Void
	assert category(Lists.Ul) is TagCategory.List
	assert category(Table.Tr) is TagCategory.Table
	assert category(Root.Body) is TagCategory.Root
	assert named("DIV") is Block.Div
	assert named("img") is Voids.Img
	with pytest.raises(KeyError):
		named("blink")


def test_encode():
	assert html.encode("<a href='x'>&</a>") == "&lt;a href='x'&gt;&amp;&lt;/a&gt;"


def test_begin_end():
	assert html.begin(Block.Div, {"id": "x"}) == '<div id="x">\n'
	assert html.begin(Lists.Ul) == "<ul>\n"
	assert html.end(Root.Body) == "\n</body>"
	with pytest.raises(BeginNotSupported):
		html.begin(Inline.Span)  # type: ignore[arg-type]
	with pytest.raises(BeginNotSupported):
		html.end(Voids.Br)  # type: ignore[arg-type]


def test_element():
	assert html.element(Block.Div, "x", {"class": "a"}) == '<div class="a">\nx\n</div>'
	assert html.element(Block.Div) == "<div>\n</div>"
	assert html.element(Block.P, "<b>", encode=True) == "<p>\n&lt;b&gt;\n</p>"
	assert html.element(Inline.Span, "x", {"hidden": True}) == "<span hidden>x</span>"
	assert html.element(Voids.Img, "ignored", {"src": "a.png"}) == '<img src="a.png">'
	assert html.element(Table.Td, "1") == "<td>\n1\n</td>"


def test_inline_void():
	assert html.inline(Inline.Em, "<i>", encode=True) == "<em>&lt;i&gt;</em>"
	assert html.inline(Inline.Em, "<i>") == "<em><i></em>"
	assert html.void(Voids.Hr, {"title": "a & b"}) == '<hr title="a &amp; b">'


def test_template():
	tokens = {"{prefix}": "", "{tag}": "<b>x</b>", "{suffix}": "!"}
	assert html.template("{prefix}\n{tag}\n{suffix}", tokens) == "<b>x</b>\n!"
	assert html.template("[{tag}]", tokens) == "[<b>x</b>]"
	assert html.template("{prefix}\n  \n{tag}", tokens) == "<b>x</b>"
	assert html.template("a\n\nb", {}) == "a\nb"


def test_template_single_pass():
	# Substituted values are output as-is, even when they look like tokens
	tokens = {"{tag}": "{suffix}", "{suffix}": "!"}
	assert html.template("{tag}|{suffix}", tokens) == "{suffix}|!"
	assert html.template("{suffix}{tag}", tokens) == "!{suffix}"


# EOF
