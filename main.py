#!/usr/bin/env python3
"""
stampit - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui or -g parameter)

Usage:
    python main.py ./photos              # Preview renames
    python main.py ./photos --write      # Rename
    python main.py --gui                 # GUI mode
    python main.py -g                    # GUI mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    # Check if GUI should be started
    if "--gui" in sys.argv or "-g" in sys.argv:
        try:
            from gui import main as gui_main
        except ImportError as e:
            print("Error: Unable to start GUI, please ensure PySide6 is installed")
            print(f"Detailed error: {e}")
            print("\nInstall command: pip install PySide6")
            print("\nTo use CLI mode, run:")
            print("    python main.py PATH")
            return 1
        return gui_main()

    # Default to the command line
    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
