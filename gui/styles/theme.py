"""
Galaxy Adventure theme: colors, spacing, and typography constants.

Deep-space dark UI with bright accents for the falling objects.
"""

# Surfaces
SURFACE_DARK = "#000814"      # Window background
SURFACE_FIELD = "#001D3D"     # Play field
SURFACE_FIELD_EDGE = "#FFFFFF"

# Text
TEXT_PRIMARY = "#FFFFFF"

# Buttons
BUTTON_MOVE = "#005F99"
BUTTON_PLAY_AGAIN = "#00FF88"
BUTTON_PLAY_AGAIN_TEXT = "#001D3D"

# Objects
SPACESHIP = "#4FC3F7"
ASTEROID = "#FF7043"
STAR = "#FFD54F"
ALIEN = "#66BB6A"
TURBO = "#F5D547"
STARFIELD = "#3A4A6A"

# Spacing scale (px)
SPACING_SM = 8
SPACING_MD = 12
SPACING_LG = 20

# Border radius (px)
RADIUS_SM = 5
RADIUS_MD = 10

# Font sizes (pt)
FONT_SIZE_BUTTON = 14
FONT_SIZE_SUBTITLE = 16
FONT_SIZE_SCORE = 20
FONT_SIZE_TITLE = 26

# Font families
FONT_UI = '"Arial", "Segoe UI", sans-serif'
