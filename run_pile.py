"""
run_pile.py — CLI Entry Point

Forwards execution to the CLI defined in `src/image_pile/cli.py` so the
tool can run without installing the package or touching PYTHONPATH.

Usage:
    python run_pile.py a.png b.png c.png --output pile.png [options]

For help on available options, run:
    python run_pile.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import image_pile.cli as ip_cli

if __name__ == "__main__":
    sys.exit(ip_cli.main())
