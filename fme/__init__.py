# python
"""fme package: in-memory file-manager emulator"""
__version__ = "0.1"

from fme.env import load_env

# FME_* settings may come from the repository .env file.
load_env()
