"""
Entry Point Script (Bootstrap)
==============================
Runs the package from a source checkout without installing it.

It modifies 'sys.path' so that 'from rocketlayout.model...' resolves
against the 'src' directory.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from rocketlayout.main import main

if __name__ == "__main__":
    main()
