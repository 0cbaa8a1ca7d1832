"""Constants for the slipbox package."""

APP_NAME = "slipbox"
APP_VERSION = "0.1.0"

# Notes
NOTES_SUBDIR = "Notes/slipbox"
JOURNAL_MARKERS = ["/journal", ".journal"]

# Editor used when neither --editor nor $EDITOR is given
DEFAULT_EDITOR = "nvim"

# Fuzzy finder
FZF_COMMAND = "fzf"  # sk or fzf or fzy
PREVIEW_COMMAND_TEMPLATE = "bat {path} --color=always --style=snip"

# Screenshots
SCREENSHOT_DIR = "/tmp/screenshots"
SCREENSHOT_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"
SCREENSHOT_EXTENSION = ".png"
IMAGE_MIME_TYPE = "image/png"

# Session detection
WAYLAND_SESSION = "wayland"
X11_SESSION = "x11"

# Slug rules, applied in this order
SLUG_SEPARATOR = " / "
SLUG_DASH_CHARS = [" ", ":", ",", "."]

# Logging
LOG_FORMAT = "%(levelname)s: %(message)s"
