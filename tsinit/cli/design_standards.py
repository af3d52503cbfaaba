"""tsconfig-init CLI design standards.

Color palette, layout and symbols shared by every console in the CLI.
"""

# Color palette
COLORS = {
    'primary': '#3B82F6',          # Questions, headers (bright blue)
    'success': '#10B981',          # Generated files (green)
    'warning': '#F59E0B',          # Overwrite notices (yellow)
    'error': '#EF4444',            # Failures (red)
    'info': '#06B6D4',             # Paths, option values (cyan)
    'muted': '#6B7280',            # Menu numbers, secondary text (gray)
}

LAYOUT = {
    'terminal_width': 100,
    'menu_indent': 2,
}

SYMBOLS = {
    'pass': '✓',
    'fail': '✗',
    'warning_text': 'ATTENTION',
}
