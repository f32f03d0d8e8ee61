"""Entry point for running skill-loader as a module.

This allows the package to be executed as:
    python -m skill_loader

It delegates to the CLI main function.
"""

import sys

from skill_loader.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
