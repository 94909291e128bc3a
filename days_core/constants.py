"""Core constants shared across configuration helpers."""

DEFAULT_IMAGE_SETTINGS = {
    'width': 1179,
    'height': 2556,
}
DEFAULT_LIMITS = {
    'min_width': 100,
    'max_width': 4000,
    'min_height': 100,
    'max_height': 8000,
}
# Query-parameter names; values are six hex digits without '#'.
PALETTE_KEYS = ('bgColor', 'primary', 'secondary', 'accent')
DEFAULT_PALETTE = {
    'bgColor': '000000',
    'primary': 'ffffff',
    'secondary': '333333',
    'accent': 'ff6b35',
}
DEFAULT_CAPTION_SETTINGS = {
    'template': 'days {current_day}/{total_days}',
    'font_family': 'sans-serif',
}
DEFAULT_RUNTIME_PATHS = {
    'out_dir': 'output',
}
DEFAULT_OUTPUT_SETTINGS = {
    'filename': 'days_{year}_{day:03d}_{width}x{height}.png',
}
VALID_IMAGE_FORMATS = ('png', 'jpg', 'jpeg', 'svg', 'pdf')
