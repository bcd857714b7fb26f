# Default scoring weights (see models.Weights)
GAP_PENALTY: int = -5            # per broken streak
PATTERN_SKIP_PENALTY: int = -10  # per pattern char treated as optional
MATCH_BONUS: int = 1             # per matched char
FIRST_LETTER_BONUS: int = 3      # per matched char on a word boundary

# /* ~~~ bytes that start a new "word" in path-like text ~~~ */
BOUNDARY_CHARS: bytes = b"-_\\/ "

# str input is matched unit-by-unit after encoding
TEXT_ENCODING: str = "utf-8"
