"""
LineCalc Configuration Settings
"""

# Application Settings
APP_NAME = "LineCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520
DISPLAY_FONT = ("Consolas", 22, "bold")
RESULT_FONT = ("Consolas", 14)
BUTTON_FONT = ("Segoe UI", 16, "bold")

# ── Palettes ───────────────────────────────────────────────────────────────────

# LIGHT palette  – blue-grey surface
THEME_LIGHT = {
    "bg":           "#ECEFF1",
    "display_bg":   "#000000",
    "display_fg":   "#FFFFFF",
    "result_fg":    "#D0D0D0",
    "btn_bg":       "#FFFFFF",
    "btn_fg":       "#263238",
    "operator_bg":  "#FB8C00",
    "operator_fg":  "#FFFFFF",
    "equals_bg":    "#388E3C",
    "equals_fg":    "#FFFFFF",
    "clear_bg":     "#E53935",
    "clear_fg":     "#FFFFFF",
    "edit_bg":      "#B0BEC5",
    "edit_fg":      "#000000",
    "danger":       "#B03A2E",
}

# DARK palette  – deep slate
THEME_DARK = {
    "bg":           "#1E2530",
    "display_bg":   "#000000",
    "display_fg":   "#9ADDB0",
    "result_fg":    "#6E8090",
    "btn_bg":       "#283040",
    "btn_fg":       "#BDD0E0",
    "operator_bg":  "#D4A020",
    "operator_fg":  "#FFFFFF",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "clear_bg":     "#E55A4E",
    "clear_fg":     "#FFFFFF",
    "edit_bg":      "#4E6070",
    "edit_fg":      "#FFFFFF",
    "danger":       "#E55A4E",
}

DARK_MODE = False


def get_theme(dark: bool) -> dict:
    """Return the active colour palette."""
    return THEME_DARK if dark else THEME_LIGHT


# Expression Settings
OPERATORS = "+-*/"
DECIMAL_PLACES = 6
ERROR_TEXT = "Error"
ERROR_NOTICE = "Invalid expression / math error"

# Notification Settings
TOAST_DURATION_MS = 2500

# Web Portal settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
MAX_SESSIONS = 256
START_WEB_PORTAL = True
