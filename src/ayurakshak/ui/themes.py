"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Severity colors for assistant replies
- Dark/light mode configuration

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Calm clinical palette: teal primary, saffron accent
AYURAKSHAK_DARK = Theme(
    name="ayurakshak-dark",
    primary="#2ec4b6",      # Teal - header, focus
    secondary="#8ecae6",    # Sky - assistant bubbles
    accent="#ffb703",       # Saffron - highlights
    foreground="#e6f1f0",
    background="#0b1416",
    success="#80ed99",      # Green - user bubbles, send button
    warning="#fb8500",      # Orange - warning replies
    error="#e63946",        # Red - emergency replies, denied notices
    surface="#13201f",
    panel="#0f1a1b",
    dark=True,
    variables={
        "block-cursor-foreground": "#0b1416",
        "block-cursor-background": "#2ec4b6",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#1f3332 30%",

        "input-cursor-background": "#e6f1f0",
        "input-cursor-foreground": "#0b1416",
        "input-selection-background": "#2ec4b6 30%",

        "border": "#2b4141",
        "border-blurred": "#1c2d2d",

        "scrollbar": "#1c2d2d",
        "scrollbar-hover": "#2b4141",
        "scrollbar-active": "#2ec4b6",
        "scrollbar-background": "#0f1a1b",
        "scrollbar-corner-color": "#0f1a1b",

        "footer-background": "#0b1416",
        "footer-key-foreground": "#ffb703",
        "footer-key-background": "#1c2d2d",

        "text-muted": "#6b8584",

        "link-color": "#8ecae6",
        "link-style": "underline",
        "link-color-hover": "#ffb703",
        "link-style-hover": "bold",
    },
)
