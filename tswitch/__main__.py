"""Entry point for t-switch (``python -m tswitch`` and the console script)."""

import sys
import traceback

from tswitch.app import main

EXIT_INTERRUPTED = 130


def run() -> None:
    """Run t-switch, turning unexpected errors into a plain traceback and status 1."""
    try:
        main()
    except KeyboardInterrupt:
        # Ctrl+C outside the picker, e.g. while a reload command is running
        print("Interrupted.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
