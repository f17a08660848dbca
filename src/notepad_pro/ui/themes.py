"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and add it to THEMES.
"""

from textual.theme import Theme

# Material-style indigo palette on a dark surface
NOTEPAD_PRO = Theme(
    name="notepad-pro",
    primary="#8c9eff",      # Indigo - main accent
    secondary="#b39ddb",    # Lavender - secondary accent
    accent="#ffd180",       # Amber - highlights
    foreground="#e3e3ea",   # Light text
    background="#121218",   # Deepest background
    success="#81c784",      # Green - unlocked states
    warning="#ffb74d",      # Orange - locked notices
    error="#e57373",        # Red - errors
    surface="#1c1c24",      # Card surface
    panel="#17171e",        # Panel backgrounds
    dark=True,
    variables={
        # Input styling
        "input-cursor-background": "#e3e3ea",
        "input-cursor-foreground": "#121218",
        "input-selection-background": "#8c9eff 30%",

        # Border colors
        "border": "#3a3a48",
        "border-blurred": "#2a2a34",

        # Scrollbar styling
        "scrollbar": "#2a2a34",
        "scrollbar-hover": "#3a3a48",
        "scrollbar-active": "#8c9eff",
        "scrollbar-background": "#17171e",
        "scrollbar-corner-color": "#17171e",

        # Footer styling
        "footer-foreground": "#c5c5d2",
        "footer-background": "#121218",
        "footer-key-foreground": "#ffd180",
        "footer-key-background": "#2a2a34",
        "footer-description-foreground": "#a0a0b4",

        # Text variants
        "text-muted": "#7a7a8c",
        "text-disabled": "#4a4a58",

        # Button styling
        "button-foreground": "#e3e3ea",
        "button-color-foreground": "#121218",
        "button-focus-text-style": "bold reverse",
    },
)

THEMES = (NOTEPAD_PRO,)
