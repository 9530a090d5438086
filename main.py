#!/usr/bin/env python3
"""
main.py - Entry point for running fontsweep from a source checkout.
"""
import sys
from pathlib import Path

if __name__ == "__main__":
    script_dir = Path(__file__).resolve().parent

    # Add the project root to Python path when not installed
    if str(script_dir) not in sys.path:
        sys.path.insert(0, str(script_dir))

    try:
        from fontsweep.cli import main
        sys.exit(main())
    except ImportError as e:
        print(f"Error importing fontsweep modules: {e}")
        print("Install the project (pip install -e .) or run from the project root.")
        sys.exit(1)
