#!/usr/bin/env python3
"""
Text Processor - Desktop Text Manipulation Tool

Main entry point for the Text Processor application.
Launches the PyQt5 GUI for editing, transforming and measuring text.

Usage:
    python main.py

Requirements:
    - PyQt5
    - BeautifulSoup4 (for opening HTML files)

Author: Text Processor Development Team
Version: 1.0.0
"""

import sys


def check_dependencies():
    """Check for required dependencies and provide helpful error messages."""
    missing_deps = []

    try:
        import PyQt5  # noqa: F401
    except ImportError:
        missing_deps.append("PyQt5")

    try:
        import bs4  # noqa: F401
    except ImportError:
        missing_deps.append("beautifulsoup4")

    if missing_deps:
        print("ERROR: Missing required dependencies:")
        for dep in missing_deps:
            print(f"  - {dep}")
        print("\nPlease install missing dependencies:")
        print(f"  pip install {' '.join(missing_deps)}")
        print("\nThen run the application again.")
        sys.exit(1)


def main():
    """Main application entry point."""
    print("Text Processor v1.0.0 - Desktop Text Manipulation Tool")
    print("=" * 50)

    check_dependencies()

    try:
        from textprocessor.gui import main as gui_main
        gui_main()

    except ImportError as e:
        print(f"ERROR: Could not import Text Processor modules: {e}")
        print("\nPlease ensure the package is installed (pip install -e .)")
        print("or that you are running from the project directory.")
        sys.exit(1)


if __name__ == '__main__':
    main()
