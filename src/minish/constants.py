DEFAULT_PROMPT = "$ "

# characters a backslash escapes inside double quotes; before anything else
# the backslash is kept
DOUBLE_QUOTE_ESCAPABLE = frozenset('"\\$`\n')

STDOUT_MARKER = "1"
STDERR_MARKER = "2"

# names handled by the dispatcher itself rather than the registry
SPECIAL_BUILTINS = ("exit", "cd")

STATUS_OK = 0
STATUS_FAILURE = 1
STATUS_CANNOT_EXECUTE = 126
STATUS_NOT_FOUND = 127
