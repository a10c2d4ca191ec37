"""
Terminal background detection.

Terminals such as rxvt, Konsole and iTerm export COLORFGBG as
"<fg>;<bg>" (sometimes "<fg>;<default>;<bg>"), where the numbers index the
16-color ANSI palette. The background entry is turned into a luma value in
[0, 1] that decides between the dark and light color themes.
"""

import logging
import os

from utils.errors import ThemeDetectionError

log = logging.getLogger(__name__)

DARK = 'dark'
LIGHT = 'light'

# xterm default 16-color palette
ANSI_PALETTE = [
    (0, 0, 0), (205, 0, 0), (0, 205, 0), (205, 205, 0),
    (0, 0, 238), (205, 0, 205), (0, 205, 205), (229, 229, 229),
    (127, 127, 127), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (92, 92, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]


def luma(r, g, b):
    """Perceived brightness of an 8-bit RGB color, from 0.0 to 1.0."""
    return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255.0


def detect_luma(environ=None):
    """Return the luma of the terminal background, or raise ThemeDetectionError."""
    environ = os.environ if environ is None else environ
    value = environ.get('COLORFGBG', '').strip()
    if not value:
        raise ThemeDetectionError("COLORFGBG is not set")

    background = value.split(';')[-1]
    try:
        index = int(background)
    except ValueError:
        raise ThemeDetectionError(f"Unrecognized COLORFGBG background: {background!r}") from None
    if not 0 <= index < len(ANSI_PALETTE):
        raise ThemeDetectionError(f"COLORFGBG background out of range: {index}")

    return luma(*ANSI_PALETTE[index])


def detect_theme(environ=None):
    """Pick 'light' when the background is bright, 'dark' otherwise or on failure."""
    try:
        value = detect_luma(environ)
    except ThemeDetectionError as e:
        log.debug("Background detection failed, assuming dark: %s", e)
        return DARK
    log.debug("Terminal background luma: %.2f", value)
    return LIGHT if value > 0.5 else DARK
