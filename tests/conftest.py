import sys
from pathlib import Path

# The project is a set of top-level modules, so make the repo root importable
# when the tests are run without installing it.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
