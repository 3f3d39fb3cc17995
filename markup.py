#!/usr/bin/env python3
"""
post-markup - inline emphasis markup for social post content

Simple usage:
    python markup.py render "**bold** and *italic*"      # Styled preview
    python markup.py render --file post.txt --runs        # Table of runs
    python markup.py wrap "hello world" 0 5 -a underline  # Toolbar action
    python markup.py length "**hello** world"             # Visible length
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from post_markup.cli import app

if __name__ == "__main__":
    app()
