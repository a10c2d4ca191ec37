import hashlib
import re
from collections import namedtuple

Rgb = namedtuple('Rgb', ['r', 'g', 'b'])

WHITE = Rgb(255, 255, 255)
GRAY = Rgb(128, 128, 128)

ANSI_ESCAPE_RE = re.compile(r'\x1b\[[0-9;?]*[ -/]*[@-~]')
HEX_COLOR_RE = re.compile(r'#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')

# ANSI color codes for terminal output
class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'

    # Foreground colors
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    DARK_GRAY = '\033[90m'


def fg(color):
    """Foreground escape for an Rgb triple."""
    return f'\033[38;2;{color.r};{color.g};{color.b}m'


def bg(color):
    """Background escape for an Rgb triple."""
    return f'\033[48;2;{color.r};{color.g};{color.b}m'


def paint(text, color):
    """Wrap text in a color, either an Rgb triple or a Colors code."""
    code = fg(color) if isinstance(color, Rgb) else color
    return f"{code}{text}{Colors.RESET}"


def strip_ansi(text):
    """Remove every ANSI escape sequence from text."""
    return ANSI_ESCAPE_RE.sub('', text)


def hsv_to_rgb(h, s, v):
    """Convert hue in degrees, saturation and value to 8-bit RGB channels."""
    c = v * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = v - c

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Rgb(int((r + m) * 255.0), int((g + m) * 255.0), int((b + m) * 255.0))


def stable_hash(text):
    """64-bit hash of text that does not change between runs."""
    digest = hashlib.md5(text.encode('utf-8')).digest()
    return int.from_bytes(digest[:8], 'big')


def color_for_label(text, is_dark_background):
    """
    Derive a background color for a label such as a commit type.

    The same label always maps to the same hue. Dark backgrounds get muted
    colors so white text stays readable on top of them; light backgrounds
    get more vibrant ones.
    """
    hue = float(stable_hash(text) % 360)
    if is_dark_background:
        saturation, brightness = 0.5, 0.5
    else:
        saturation, brightness = 0.7, 0.8
    return hsv_to_rgb(hue, saturation, brightness)


def hex_to_color(hex_str):
    """Parse an RRGGBB string (optional leading '#'), falling back to white."""
    match = HEX_COLOR_RE.fullmatch(hex_str or '')
    if not match:
        return WHITE
    return Rgb(*(int(channel, 16) for channel in match.groups()))
