"""Defaults for the autocomplete index and its interactive session."""

DEFAULT_STORE_PATH = "autocomplete.json"
DEFAULT_LIMIT = 10  # completions shown per entered word

# When the index writes its blob back to the store:
#   word  -- after every accepted word
#   exit  -- once, when the session ends
#   never -- in-memory only
FLUSH_WORD = "word"
FLUSH_EXIT = "exit"
FLUSH_NEVER = "never"
FLUSH_MODES = (FLUSH_WORD, FLUSH_EXIT, FLUSH_NEVER)

PROMPT = "Enter a word to add (blank line to finish): "
