from enum import Enum

# --
# Enumerations of the attribute names and values defined by the HTML Living
# Standard and WAI-ARIA. Any of them can be given where an attribute key or
# value is expected, they normalize to their string value.
#
# SEE: https://html.spec.whatwg.org/multipage/dom.html#global-attributes


class AttributeProperty(Enum):
	Accept = "accept"
	AcceptCharset = "accept-charset"
	Accesskey = "accesskey"
	Action = "action"
	Align = "align"
	Allow = "allow"
	Alt = "alt"
	Async = "async"
	Autocapitalize = "autocapitalize"
	Autocomplete = "autocomplete"
	Autofocus = "autofocus"
	Autoplay = "autoplay"
	Background = "background"
	Bgcolor = "bgcolor"
	Border = "border"
	Capture = "capture"
	Charset = "charset"
	Checked = "checked"
	Cite = "cite"
	Color = "color"
	Cols = "cols"
	Colspan = "colspan"
	Content = "content"
	Contenteditable = "contenteditable"
	Controls = "controls"
	Coords = "coords"
	Crossorigin = "crossorigin"
	CssClass = "class"
	Datetime = "datetime"
	Decoding = "decoding"
	Defer = "defer"
	Dir = "dir"
	Dirname = "dirname"
	Disabled = "disabled"
	Download = "download"
	Draggable = "draggable"
	Enctype = "enctype"
	Enterkeyhint = "enterkeyhint"
	Fetchpriority = "fetchpriority"
	For = "for"
	Form = "form"
	Formaction = "formaction"
	Formenctype = "formenctype"
	Formmethod = "formmethod"
	Formnovalidate = "formnovalidate"
	Formtarget = "formtarget"
	Headers = "headers"
	Height = "height"
	Hidden = "hidden"
	High = "high"
	Href = "href"
	Hreflang = "hreflang"
	HttpEquiv = "http-equiv"
	Id = "id"
	Inputmode = "inputmode"
	Integrity = "integrity"
	Ismap = "ismap"
	Itemid = "itemid"
	Itemprop = "itemprop"
	Itemref = "itemref"
	Itemscope = "itemscope"
	Itemtype = "itemtype"
	Kind = "kind"
	Label = "label"
	Lang = "lang"
	List = "list"
	Loading = "loading"
	Loop = "loop"
	Low = "low"
	Max = "max"
	Maxlength = "maxlength"
	Media = "media"
	Method = "method"
	Min = "min"
	Minlength = "minlength"
	Multiple = "multiple"
	Muted = "muted"
	Name = "name"
	Novalidate = "novalidate"
	Open = "open"
	Optimum = "optimum"
	Pattern = "pattern"
	Ping = "ping"
	Placeholder = "placeholder"
	Playsinline = "playsinline"
	Poster = "poster"
	Preload = "preload"
	Readonly = "readonly"
	Referrerpolicy = "referrerpolicy"
	Rel = "rel"
	Required = "required"
	Reversed = "reversed"
	Role = "role"
	Rows = "rows"
	Rowspan = "rowspan"
	Sandbox = "sandbox"
	Scope = "scope"
	Selected = "selected"
	Shape = "shape"
	Size = "size"
	Sizes = "sizes"
	Slot = "slot"
	Span = "span"
	Spellcheck = "spellcheck"
	Src = "src"
	Srcdoc = "srcdoc"
	Srclang = "srclang"
	Srcset = "srcset"
	Start = "start"
	Step = "step"
	Style = "style"
	Tabindex = "tabindex"
	Target = "target"
	Title = "title"
	Translate = "translate"
	Type = "type"
	Usemap = "usemap"
	Value = "value"
	Width = "width"
	Wrap = "wrap"


class Aria(Enum):
	"""ARIA states and properties, without the `aria-` prefix."""

	Activedescendant = "activedescendant"
	Atomic = "atomic"
	Autocomplete = "autocomplete"
	Braillelabel = "braillelabel"
	Brailleroledescription = "brailleroledescription"
	Busy = "busy"
	Checked = "checked"
	Colcount = "colcount"
	Colindex = "colindex"
	Colindextext = "colindextext"
	Colspan = "colspan"
	Controls = "controls"
	Current = "current"
	Describedby = "describedby"
	Description = "description"
	Details = "details"
	Disabled = "disabled"
	Dropeffect = "dropeffect"
	Errormessage = "errormessage"
	Expanded = "expanded"
	Flowto = "flowto"
	Grabbed = "grabbed"
	Haspopup = "haspopup"
	Hidden = "hidden"
	Invalid = "invalid"
	Keyshortcuts = "keyshortcuts"
	Label = "label"
	Labelledby = "labelledby"
	Level = "level"
	Live = "live"
	Modal = "modal"
	Multiline = "multiline"
	Multiselectable = "multiselectable"
	Orientation = "orientation"
	Owns = "owns"
	Placeholder = "placeholder"
	Posinset = "posinset"
	Pressed = "pressed"
	Readonly = "readonly"
	Relevant = "relevant"
	Required = "required"
	Roledescription = "roledescription"
	Rowcount = "rowcount"
	Rowindex = "rowindex"
	Rowindextext = "rowindextext"
	Rowspan = "rowspan"
	Selected = "selected"
	Setsize = "setsize"
	Sort = "sort"
	Valuemax = "valuemax"
	Valuemin = "valuemin"
	Valuenow = "valuenow"
	Valuetext = "valuetext"


class DataProperty(Enum):
	"""Common `data-*` keys, without the `data-` prefix."""

	Action = "action"
	Confirm = "confirm"
	Content = "content"
	Dismiss = "dismiss"
	Id = "id"
	Key = "key"
	Method = "method"
	Name = "name"
	Parent = "parent"
	Placement = "placement"
	Target = "target"
	Toggle = "toggle"
	Trigger = "trigger"
	Url = "url"
	Value = "value"


class Event(Enum):
	"""Event handler content attributes."""

	Abort = "onabort"
	AnimationCancel = "onanimationcancel"
	AnimationEnd = "onanimationend"
	AnimationIteration = "onanimationiteration"
	AnimationStart = "onanimationstart"
	AuxClick = "onauxclick"
	BeforeInput = "onbeforeinput"
	BeforeMatch = "onbeforematch"
	BeforeToggle = "onbeforetoggle"
	Blur = "onblur"
	CanPlay = "oncanplay"
	CanPlayThrough = "oncanplaythrough"
	Cancel = "oncancel"
	Change = "onchange"
	Click = "onclick"
	Close = "onclose"
	Command = "oncommand"
	ContentVisibilityAutoStateChange = "oncontentvisibilityautostatechange"
	ContextLost = "oncontextlost"
	ContextMenu = "oncontextmenu"
	ContextRestored = "oncontextrestored"
	Copy = "oncopy"
	CueChange = "oncuechange"
	Cut = "oncut"
	DoubleClick = "ondblclick"
	Drag = "ondrag"
	DragEnd = "ondragend"
	DragEnter = "ondragenter"
	DragLeave = "ondragleave"
	DragOver = "ondragover"
	DragStart = "ondragstart"
	Drop = "ondrop"
	DurationChange = "ondurationchange"
	Emptied = "onemptied"
	Ended = "onended"
	Error = "onerror"
	Focus = "onfocus"
	FocusIn = "onfocusin"
	FocusOut = "onfocusout"
	FormData = "onformdata"
	FullscreenChange = "onfullscreenchange"
	FullscreenError = "onfullscreenerror"
	GestureChange = "ongesturechange"
	GestureEnd = "ongestureend"
	GestureStart = "ongesturestart"
	GotPointerCapture = "ongotpointercapture"
	Input = "oninput"
	Invalid = "oninvalid"
	KeyDown = "onkeydown"
	KeyPress = "onkeypress"
	KeyUp = "onkeyup"
	Load = "onload"
	LoadStart = "onloadstart"
	LoadedData = "onloadeddata"
	LoadedMetadata = "onloadedmetadata"
	LostPointerCapture = "onlostpointercapture"
	MouseDown = "onmousedown"
	MouseEnter = "onmouseenter"
	MouseLeave = "onmouseleave"
	MouseMove = "onmousemove"
	MouseOut = "onmouseout"
	MouseOver = "onmouseover"
	MouseUp = "onmouseup"
	MouseWheel = "onmousewheel"
	Paste = "onpaste"
	Pause = "onpause"
	Play = "onplay"
	Playing = "onplaying"
	PointerCancel = "onpointercancel"
	PointerDown = "onpointerdown"
	PointerEnter = "onpointerenter"
	PointerLeave = "onpointerleave"
	PointerMove = "onpointermove"
	PointerOut = "onpointerout"
	PointerOver = "onpointerover"
	PointerRawUpdate = "onpointerrawupdate"
	PointerUp = "onpointerup"
	Progress = "onprogress"
	RateChange = "onratechange"
	Reset = "onreset"
	Resize = "onresize"
	Scroll = "onscroll"
	ScrollEnd = "onscrollend"
	ScrollSnapChange = "onscrollsnapchange"
	ScrollSnapChanging = "onscrollsnapchanging"
	SecurityPolicyViolation = "onsecuritypolicyviolation"
	Seeked = "onseeked"
	Seeking = "onseeking"
	Select = "onselect"
	SelectStart = "onselectstart"
	SelectionChange = "onselectionchange"
	SlotChange = "onslotchange"
	Stalled = "onstalled"
	Submit = "onsubmit"
	Suspend = "onsuspend"
	TimeUpdate = "ontimeupdate"
	Toggle = "ontoggle"
	TouchCancel = "ontouchcancel"
	TouchEnd = "ontouchend"
	TouchMove = "ontouchmove"
	TouchStart = "ontouchstart"
	TransitionCancel = "ontransitioncancel"
	TransitionEnd = "ontransitionend"
	TransitionRun = "ontransitionrun"
	TransitionStart = "ontransitionstart"
	VolumeChange = "onvolumechange"
	Waiting = "onwaiting"
	WebkitMouseForceChanged = "onwebkitmouseforcechanged"
	WebkitMouseForceDown = "onwebkitmouseforcedown"
	WebkitMouseForceUp = "onwebkitmouseforceup"
	WebkitMouseForceWillBegin = "onwebkitmouseforcewillbegin"
	Wheel = "onwheel"


class ContentEditable(Enum):
	False_ = "false"
	PlaintextOnly = "plaintext-only"
	True_ = "true"


class Direction(Enum):
	Auto = "auto"
	Ltr = "ltr"
	Rtl = "rtl"


class Draggable(Enum):
	False_ = "false"
	True_ = "true"


class Language(Enum):
	"""A selection of BCP 47 language tags."""

	Arabic = "ar"
	Bengali = "bn"
	Bulgarian = "bg"
	Catalan = "ca"
	Chinese = "zh"
	ChineseSimplified = "zh-CN"
	ChineseTraditional = "zh-TW"
	Croatian = "hr"
	Czech = "cs"
	Danish = "da"
	Dutch = "nl"
	English = "en"
	EnglishUk = "en-GB"
	EnglishUs = "en-US"
	Estonian = "et"
	Finnish = "fi"
	French = "fr"
	German = "de"
	Greek = "el"
	Hebrew = "he"
	Hindi = "hi"
	Hungarian = "hu"
	Indonesian = "id"
	Italian = "it"
	Japanese = "ja"
	Korean = "ko"
	Latvian = "lv"
	Lithuanian = "lt"
	Norwegian = "no"
	Polish = "pl"
	Portuguese = "pt"
	PortugueseBrazil = "pt-BR"
	Romanian = "ro"
	Russian = "ru"
	Serbian = "sr"
	Slovak = "sk"
	Slovenian = "sl"
	Spanish = "es"
	SpanishLatinAmerica = "es-419"
	SpanishSpain = "es-ES"
	Swedish = "sv"
	Thai = "th"
	Turkish = "tr"
	Ukrainian = "uk"
	Vietnamese = "vi"


class Role(Enum):
	"""WAI-ARIA roles."""

	Alert = "alert"
	AlertDialog = "alertdialog"
	Application = "application"
	Article = "article"
	Associationlist = "associationlist"
	Associationlistitemkey = "associationlistitemkey"
	Associationlistitemvalue = "associationlistitemvalue"
	Banner = "banner"
	Blockquote = "blockquote"
	Button = "button"
	Caption = "caption"
	Cell = "cell"
	Checkbox = "checkbox"
	Code = "code"
	ColumnHeader = "columnheader"
	Combobox = "combobox"
	Command = "command"
	Comment = "comment"
	Complementary = "complementary"
	Composite = "composite"
	Contentinfo = "contentinfo"
	Definition = "definition"
	Deletion = "deletion"
	Dialog = "dialog"
	Directory = "directory"
	Document = "document"
	Emphasis = "emphasis"
	Feed = "feed"
	Figure = "figure"
	Form = "form"
	Generic = "generic"
	Grid = "grid"
	Gridcell = "gridcell"
	Group = "group"
	Heading = "heading"
	Img = "img"
	Input = "input"
	Insertion = "insertion"
	Landmark = "landmark"
	Link = "link"
	List = "list"
	Listbox = "listbox"
	Listitem = "listitem"
	Log = "log"
	Main = "main"
	Mark = "mark"
	Marquee = "marquee"
	Math = "math"
	Menu = "menu"
	Menubar = "menubar"
	Menuitem = "menuitem"
	MenuitemCheckbox = "menuitemcheckbox"
	MenuitemRadio = "menuitemradio"
	Meter = "meter"
	Navigation = "navigation"
	None_ = "none"
	Note = "note"
	Option = "option"
	Paragraph = "paragraph"
	Presentation = "presentation"
	Progressbar = "progressbar"
	Radio = "radio"
	Radiogroup = "radiogroup"
	Range = "range"
	Region = "region"
	Roletype = "roletype"
	Row = "row"
	Rowgroup = "rowgroup"
	Rowheader = "rowheader"
	Scrollbar = "scrollbar"
	Search = "search"
	Searchbox = "searchbox"
	Section = "section"
	Sectionhead = "sectionhead"
	Select = "select"
	Separator = "separator"
	Slider = "slider"
	Spinbutton = "spinbutton"
	Status = "status"
	Strong = "strong"
	Structure = "structure"
	Subscript = "subscript"
	Suggestion = "suggestion"
	Superscript = "superscript"
	Switch = "switch"
	Tab = "tab"
	Tablist = "tablist"
	Tabpanel = "tabpanel"
	Term = "term"
	Textbox = "textbox"
	Time = "time"
	Timer = "timer"
	Toolbar = "toolbar"
	Tooltip = "tooltip"
	Tree = "tree"
	Treegrid = "treegrid"
	Treeitem = "treeitem"
	Widget = "widget"
	Window = "window"


class Translate(Enum):
	No = "no"
	Yes = "yes"


# EOF
