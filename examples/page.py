"""
Page Example

This demonstrates building a page with htmltag.
Features shown:
- Fluent, copy-on-write attribute setters
- Nested `begin()`/`end()` blocks
- Global defaults registered at startup
- Prefix and suffix decoration of inline tags
- htmltag logging for nicer output

Usage:
    python page.py
    HTMLTAG_LOG_LEVEL=Debug python page.py
"""

from htmltag import A, Div, Img, Li, Nav, Section, Span, Ul, setDefaults
from htmltag.tags import Inline
from htmltag.values import Role
from htmltag.utils.logging import info

# Defaults are registered once, before any tag is created
setDefaults(Section, {"class": "section"})

LINKS = {"Home": "/", "About": "/about", "Contact": "/contact"}


def menu() -> str:
	items = "\n".join(
		Li.tag().html(A.tag().setHref(href).content(label)).render()
		for label, href in LINKS.items()
	)
	return Nav.tag().setRole(Role.Navigation).html(Ul.tag().html(items)).render()


def page() -> str:
	link = A.tag().setHref("/about")
	output = [
		Div.tag().setId("page").begin(),
		menu(),
		Section.tag().addAriaAttribute("labelledby", "title").begin(),
		Img.tag().setSrc("logo.png").setAlt("Logo").render(),
		Span.tag()
		.content("Saved")
		.setAttributes({"role": "alert", "aria-live": "polite"})
		.suffix("✓")
		.suffixTag(Inline.Strong)
		.render(),
		# Setters return copies, `link` is left untouched
		link.setClass("active").content("About us").render(),
		link.content("About").render(),
		Section.end(),
		Div.end(),
	]
	return "\n".join(output)


if __name__ == "__main__":
	info("Rendering page")
	print(page())

# EOF
