"""
AuthFlow Theme - Centralized color palette.

Color Philosophy:
- Magenta header bar and buttons, as in the classic demo layout
- Dark page background with light cards
- Invalid fields use a red border on a pink fill
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
MAGENTA_PRIMARY = "#741188"    # Header bar, primary buttons
MAGENTA_DARK = "#4F005F"       # Hover/pressed accents
CYAN_PRIMARY = "#48b0f7"       # Info log entries
TEAL_PRIMARY = "#4ECDC4"       # Success
GOLD_PRIMARY = "#F3CAFB"       # Header link text
RED_PRIMARY = "#FF6B6B"        # Errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#FFFFFF"
TEXT_DARK = "#1F1F1F"
TEXT_MUTED = "#8A9BA8"

# =============================================================================
# BACKGROUND COLORS
# =============================================================================
BG_PAGE = "#3F3F3F"
BG_CARD = "#FFFFFF"
BG_INPUT = "#FFFFFF"
BG_INPUT_INVALID = "#FBDADA"
BG_BUTTON_DISABLED = "#CCCCCC"

# =============================================================================
# BORDER COLORS
# =============================================================================
BORDER_INPUT = "#CCCCCC"
BORDER_INPUT_INVALID = "#B40E0E"

# =============================================================================
# LOG LEVEL COLORS
# =============================================================================
LOG_INFO = CYAN_PRIMARY
LOG_SUCCESS = TEAL_PRIMARY
LOG_WARNING = GOLD_PRIMARY
LOG_ERROR = RED_PRIMARY
LOG_DEBUG = TEXT_MUTED


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================
def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
        "DEBUG": LOG_DEBUG,
    }
    return colors.get(level.upper(), TEXT_MUTED)


def get_input_colors(invalid: bool) -> tuple[str, str]:
    """Return (border, fill) for an input field."""
    if invalid:
        return BORDER_INPUT_INVALID, BG_INPUT_INVALID
    return BORDER_INPUT, BG_INPUT
