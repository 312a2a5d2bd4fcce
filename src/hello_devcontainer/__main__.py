"""Module entry point: ``python -m hello_devcontainer`` prints the greeting.

Without arguments the CLI greets exactly once and exits with status 0.
Importing this module has no side effects; the run happens only under the
``__main__`` guard.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
