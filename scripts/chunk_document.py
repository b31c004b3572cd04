#!/usr/bin/env python3
"""Chunk a document from a source checkout and report chunking quality.

Same options as the ``content-chunk`` command, without installing the package.

Usage:
    python scripts/chunk_document.py docs/report.md
    python scripts/chunk_document.py docs/report.md --show-chunks 3
    python scripts/chunk_document.py docs/report.md --json
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from content_chunking.cli import main

if __name__ == "__main__":
    sys.exit(main())
