"""
Nerd Font icons for file names.

Lookups go by exact file name first, then by extension (longest match wins,
so 'tar.gz' beats 'gz'). Each entry carries a color for dark terminals and a
darker one for light terminals.
"""

import os

DEFAULT_ICON = ('', '#7e8e91', '#4d5a5e')

FILENAME_ICONS = {
    '.gitignore': ('', '#41535b', '#41535b'),
    '.gitattributes': ('', '#41535b', '#41535b'),
    '.gitmodules': ('', '#41535b', '#41535b'),
    '.editorconfig': ('', '#fff2f2', '#333030'),
    '.env': ('', '#faf743', '#32310d'),
    'dockerfile': ('', '#458ee6', '#2e5f99'),
    'docker-compose.yml': ('', '#458ee6', '#2e5f99'),
    'makefile': ('', '#6d8086', '#526064'),
    'cargo.toml': ('', '#dea584', '#6f5242'),
    'cargo.lock': ('', '#dea584', '#6f5242'),
    'package.json': ('', '#e8274b', '#ae1d38'),
    'package-lock.json': ('', '#7a0d21', '#7a0d21'),
    'license': ('', '#d0bf41', '#686020'),
    'readme.md': ('', '#dddddd', '#6f6f6f'),
    'requirements.txt': ('', '#ffbc03', '#805e02'),
    'pyproject.toml': ('', '#ffbc03', '#805e02'),
}

EXTENSION_ICONS = {
    'py': ('', '#ffbc03', '#805e02'),
    'pyi': ('', '#ffbc03', '#805e02'),
    'ipynb': ('', '#51a0cf', '#366b8a'),
    'rs': ('', '#dea584', '#6f5242'),
    'go': ('', '#00add8', '#005b70'),
    'js': ('', '#cbcb41', '#666620'),
    'mjs': ('', '#f1e05a', '#504b1e'),
    'ts': ('', '#519aba', '#36677c'),
    'tsx': ('', '#1354bf', '#0d3880'),
    'jsx': ('', '#20c2e3', '#158197'),
    'java': ('', '#cc3e44', '#992e33'),
    'kt': ('', '#7f52ff', '#5f3ebf'),
    'c': ('', '#599eff', '#3b69aa'),
    'h': ('', '#a074c4', '#6b4d83'),
    'cpp': ('', '#519aba', '#36677c'),
    'hpp': ('', '#a074c4', '#6b4d83'),
    'cs': ('\U000f031b', '#596706', '#434d04'),
    'rb': ('', '#701516', '#701516'),
    'php': ('', '#a074c4', '#6b4d83'),
    'swift': ('', '#e37933', '#aa5a26'),
    'lua': ('', '#51a0cf', '#366b8a'),
    'sh': ('', '#4d5a5e', '#3a4446'),
    'bash': ('', '#89e051', '#447028'),
    'zsh': ('', '#89e051', '#447028'),
    'html': ('', '#e44d26', '#aB3a1c'),
    'css': ('', '#42a5f5', '#2c6ea3'),
    'scss': ('', '#f55385', '#a33759'),
    'json': ('', '#cbcb41', '#666620'),
    'toml': ('', '#9c4221', '#753219'),
    'yaml': ('', '#6d8086', '#526064'),
    'yml': ('', '#6d8086', '#526064'),
    'xml': ('\U000f05c0', '#e37933', '#aa5a26'),
    'md': ('', '#dddddd', '#6f6f6f'),
    'rst': ('', '#42a5f5', '#2c6ea3'),
    'txt': ('', '#89e051', '#447028'),
    'lock': ('', '#bbbbbb', '#5e5e5e'),
    'sql': ('', '#dad8d8', '#494848'),
    'svg': ('\U000f0721', '#ffb13b', '#80581e'),
    'png': ('', '#a074c4', '#6b4d83'),
    'jpg': ('', '#a074c4', '#6b4d83'),
    'gif': ('', '#a074c4', '#6b4d83'),
    'zip': ('', '#eca517', '#76520c'),
    'gz': ('', '#eca517', '#76520c'),
    'tar.gz': ('', '#eca517', '#76520c'),
    'pdf': ('', '#b30b00', '#b30b00'),
    'vim': ('', '#019833', '#017226'),
    'nix': ('', '#7ebae4', '#3f5d72'),
}


def _lookup(name):
    lowered = name.lower()
    if lowered in FILENAME_ICONS:
        return FILENAME_ICONS[lowered]

    # 'archive.tar.gz' -> try 'tar.gz' before 'gz'
    parts = lowered.lstrip('.').split('.')
    for i in range(1, len(parts)):
        extension = '.'.join(parts[i:])
        if extension in EXTENSION_ICONS:
            return EXTENSION_ICONS[extension]
    return DEFAULT_ICON


def icon_for_file(name, theme='dark'):
    """Return (glyph, hex color) for a file name under a 'dark' or 'light' theme."""
    glyph, dark_color, light_color = _lookup(os.path.basename(name))
    return glyph, light_color if theme == 'light' else dark_color
