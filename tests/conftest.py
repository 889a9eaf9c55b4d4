import sys
from pathlib import Path

# import the packages under test from the source tree rather than an install
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))
