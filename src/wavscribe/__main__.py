"""Run wavscribe as a module: python -m wavscribe recording.wav"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
