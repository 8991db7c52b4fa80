VERSION = "0.3.1"

CLIENT_NAME = "jsonrfc"

# RFC 6901 token addressing the position past the last element of an array
APPEND_MARKER = "-"

POINTER_SEPARATOR = "/"
