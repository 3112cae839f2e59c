from os import getenv

# Minimum level of the log entries that get written, see `utils.logging.LogLevel`
LOG_LEVEL: str = getenv("HTMLTAG_LOG_LEVEL", "Info")

LOG_ORIGIN: str = getenv("HTMLTAG_LOG_ORIGIN", "htmltag")

# Default layout of decorated inline tags, lines rendering empty are dropped.
TEMPLATE: str = "{prefix}\n{tag}\n{suffix}"

# EOF
