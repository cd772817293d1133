"""
Regular expression patterns for phone formatting and terminal input.
"""

import re

# ============================================================
# PHONE NUMBER PATTERNS
# ============================================================

# Anything that is not a digit (stripped before regrouping)
NON_DIGIT_PATTERN = re.compile(r'\D')

# Exactly ten digits, split 3-3-4
TEN_DIGIT_GROUPS = re.compile(r'^(\d{3})(\d{3})(\d{4})$')

# ============================================================
# TERMINAL INPUT PATTERNS
# ============================================================

# SGR mouse report: ESC [ < button ; column ; row (M = press, m = release)
SGR_MOUSE_PATTERN = re.compile(r'\x1b\[<(\d+);(\d+);(\d+)([Mm])')

# CSI / SS3 cursor keys (ESC [ A, ESC O B, ESC [ 1 ; 5 A, ...)
CURSOR_KEY_PATTERN = re.compile(r'\x1b(?:\[(?:\d+(?:;\d+)?)?|O)([ABCD])')

# Any other CSI sequence we do not act on (function keys, paste markers, ...)
OTHER_CSI_PATTERN = re.compile(r'\x1b\[[0-9;?]*[~A-Za-z]')

# Start of an escape sequence cut off at the end of a read (ESC, ESC [ 1 ;, ESC [ < 0 ; 12, ESC O)
INCOMPLETE_ESCAPE_PATTERN = re.compile(r'\x1b(?:\[[0-9;<?]*|O)?\Z')

# ============================================================
# HELPER FUNCTIONS
# ============================================================

def strip_non_digits(text: str) -> str:
    """Remove every non-digit character."""
    if not text:
        return ""
    return NON_DIGIT_PATTERN.sub('', text)


def group_dotted(digits: str) -> str:
    """
    Group a ten-digit string as DDD.DDD.DDDD.
    Any other length is returned ungrouped.
    """
    match = TEN_DIGIT_GROUPS.match(digits)
    if not match:
        return digits
    return '.'.join(match.groups())
