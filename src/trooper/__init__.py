"""Modal, vim-style terminal file manager."""

__all__ = [
    "actions",
    "adapters",
    "bookmarks",
    "context",
    "errors",
    "fs",
    "keymaps",
    "modes",
    "runtime",
    "state",
]

__version__ = "0.1.0"
