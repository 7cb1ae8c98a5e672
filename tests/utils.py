import sys
from pathlib import Path


def setup():
    moduleRoot = str(Path(__file__).parent.parent)

    if moduleRoot not in sys.path:
        sys.path.insert(0, moduleRoot)
