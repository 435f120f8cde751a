"""Run with: python -m rasterpaint"""
import sys

from rasterpaint.main import main

if __name__ == "__main__":
    sys.exit(main())
