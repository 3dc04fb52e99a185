"""Material Design building blocks: color themes, grid layout, icon/label positioning, clipboard, text files, folder trees and logging."""

__version__ = "1.4.0"

__all__ = [
    "clipboard",
    "color_theme",
    "elements",
    "folder_tree",
    "icon_label",
    "icon_label_positioner",
    "layout",
    "logger",
    "text_file",
]