"""
organizer_gui - PySide6 front-end for Extension Organizer

PySide6 is only imported when main() runs, so the view-model can be used
without it.
"""


def main():
    """GUI main entry"""
    from .gui_entry import main as gui_main
    return gui_main()


__all__ = ["main"]
