#!/usr/bin/env python3

"""
Manage a persisted campus portal from the command line.

See campus_portal/cli.py for the available commands, or run:
    python portal.py --help
"""

import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from campus_portal.cli import main

if __name__ == "__main__":
    main()
