from .tag import BaseTag  # NOQA: F401
from .factory import Defaults, DEFAULTS, setDefaults, getDefaults  # NOQA: F401
from .elements import (  # NOQA: F401
	BaseBlock,
	BaseInline,
	BaseVoid,
	Div,
	Section,
	Article,
	Nav,
	Main,
	Header,
	Footer,
	P,
	Ul,
	Ol,
	Li,
	Table,
	Span,
	A,
	Strong,
	Em,
	Button,
	Label,
	Img,
	Br,
	Hr,
	Input,
)
from .errors import (  # NOQA: F401
	HTMLTagError,
	KeyInvalid,
	ValueTypeInvalid,
	EventKeyPrefixMissing,
	EnumValueNotAllowed,
	NoMatchingBegin,
	TagTypeMismatch,
	AbstractInstantiation,
	BeginNotSupported,
)

__version__ = "0.1.0"

# EOF
