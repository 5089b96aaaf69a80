"""python -m sqlitemgr"""

from sqlitemgr.cli import entry

if __name__ == "__main__":
    entry()
