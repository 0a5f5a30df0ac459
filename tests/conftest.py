import sys
from pathlib import Path

import matplotlib

# tests never open a window, plots are written to files
matplotlib.use("Agg")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
	sys.path.insert(0, str(SRC))
