import pytest
from htmltag import context
from htmltag.factory import DEFAULTS


@pytest.fixture(autouse=True)
def isolated():
	"""Each test starts with an empty tag stack and no registered defaults."""
	context.reset()
	DEFAULTS.clear()
	yield
	context.reset()
	DEFAULTS.clear()


# EOF
