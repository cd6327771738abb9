#!/usr/bin/env python3
"""
Extension Organizer - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli parameter)

Usage:
    python main.py                          # GUI mode (default)
    python main.py --cli ./Downloads        # Move files into per-extension folders
    python main.py --cli ./Downloads --copy # Copy instead of moving
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv:
        # CLI mode
        from organizer_cli import main as cli_main
        return cli_main([arg for arg in sys.argv[1:] if arg != "--cli"])

    # Default to starting GUI
    try:
        from organizer_gui import main as gui_main
        return gui_main()
    except ImportError as e:
        print("Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    python main.py --cli <path>")
        return 1


if __name__ == "__main__":
    sys.exit(main())
