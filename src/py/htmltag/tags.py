from enum import Enum
from typing import TypeAlias

# --
# Tag names grouped by how they render. Each category is a closed enumeration
# and the renderer dispatches on the category rather than on the tag name.
#
# SEE: https://developer.mozilla.org/en-US/docs/Web/HTML/Reference/Elements


class TagCategory(Enum):
	Block = "block"
	Inline = "inline"
	Void = "void"
	List = "list"
	Table = "table"
	Root = "root"


class Block(Enum):
	"""Block-level elements, rendering their content on its own lines."""

	Address = "address"
	Article = "article"
	Aside = "aside"
	Audio = "audio"
	Blockquote = "blockquote"
	Canvas = "canvas"
	Del = "del"
	Details = "details"
	Dialog = "dialog"
	Div = "div"
	Fieldset = "fieldset"
	Figcaption = "figcaption"
	Figure = "figure"
	Footer = "footer"
	Form = "form"
	H1 = "h1"
	H2 = "h2"
	H3 = "h3"
	H4 = "h4"
	H5 = "h5"
	H6 = "h6"
	Header = "header"
	Hgroup = "hgroup"
	Iframe = "iframe"
	Ins = "ins"
	Legend = "legend"
	Main = "main"
	Menu = "menu"
	Nav = "nav"
	Object = "object"
	P = "p"
	Pre = "pre"
	Search = "search"
	Section = "section"
	Summary = "summary"
	Video = "video"


class Inline(Enum):
	"""Inline elements, rendering their content between the tags."""

	A = "a"
	Abbr = "abbr"
	B = "b"
	Bdi = "bdi"
	Bdo = "bdo"
	Button = "button"
	Cite = "cite"
	Code = "code"
	Data = "data"
	Dfn = "dfn"
	Em = "em"
	I = "i"
	Kbd = "kbd"
	Label = "label"
	Map = "map"
	Mark = "mark"
	Meter = "meter"
	Output = "output"
	Picture = "picture"
	Progress = "progress"
	Q = "q"
	Rp = "rp"
	Rt = "rt"
	Ruby = "ruby"
	S = "s"
	Samp = "samp"
	Small = "small"
	Span = "span"
	Strong = "strong"
	Sub = "sub"
	Sup = "sup"
	Time = "time"
	U = "u"
	Var = "var"


class Voids(Enum):
	"""Void elements, which have no content and no end tag."""

	Area = "area"
	Base = "base"
	Br = "br"
	Col = "col"
	Embed = "embed"
	Hr = "hr"
	Img = "img"
	Input = "input"
	Link = "link"
	Meta = "meta"
	Source = "source"
	Track = "track"
	Wbr = "wbr"


class Lists(Enum):
	Dd = "dd"
	Dl = "dl"
	Dt = "dt"
	Li = "li"
	Ol = "ol"
	Ul = "ul"


class Table(Enum):
	Caption = "caption"
	Colgroup = "colgroup"
	Table = "table"
	Tbody = "tbody"
	Td = "td"
	Tfoot = "tfoot"
	Th = "th"
	Thead = "thead"
	Tr = "tr"


class Root(Enum):
	Body = "body"
	Head = "head"
	Html = "html"


TTag: TypeAlias = Block | Inline | Voids | Lists | Table | Root
# Tags that can be opened with `begin()` and closed later with `end()`
TBlockTag: TypeAlias = Block | Lists | Table | Root

CATEGORIES: dict[type[Enum], TagCategory] = {
	Block: TagCategory.Block,
	Inline: TagCategory.Inline,
	Voids: TagCategory.Void,
	Lists: TagCategory.List,
	Table: TagCategory.Table,
	Root: TagCategory.Root,
}


def category(tag: TTag) -> TagCategory:
	"""Returns the category of the given tag name."""
	try:
		return CATEGORIES[type(tag)]
	except KeyError:
		raise ValueError(f"Unsupported tag type {type(tag).__name__}: {tag}")


def named(name: str) -> TTag:
	"""Looks up the tag with the given name (like `div`) in all the
	categories."""
	for kind in CATEGORIES:
		try:
			return kind(name.lower())
		except ValueError:
			pass
	raise KeyError(f"No tag {name}")


# EOF
