import os
import sys

import matplotlib

# example scripts are imported as `examples.<name>` from the project root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

matplotlib.use("Agg")
