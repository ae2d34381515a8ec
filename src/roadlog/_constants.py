"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Line grammar fragments
# ------------------------------------------------------------------

ALNUM = "[A-Za-z0-9]"
CAR_NAME = ALNUM + "{3,11}"
ROAD_NAME = "[AS][1-9][0-9]{0,2}"
KM_WHOLE = "[1-9][0-9]*|0"
KM_TENTHS = "[0-9]"


def group(pattern: str) -> str:
    """Wrap *pattern* in a capturing group."""
    return f"({pattern})"


# ------------------------------------------------------------------
# Output formats
# ------------------------------------------------------------------

DIAGNOSTIC_FORMAT = "Error in line {line_no}: {text}"
KM_SEPARATOR = ","
TENTHS_PER_UNIT = 10
