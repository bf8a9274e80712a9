"""Global pytest configuration."""

import sys
from pathlib import Path

# Make backend/ and scripts/ importable from the repo root
sys.path.insert(0, str(Path(__file__).parent))
