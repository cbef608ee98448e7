# python
"""
fme.__main__
Entry point for python -m fme
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
