#!/usr/bin/env python3
"""path-update - show the entries of a PATH-style search path."""

from path_update.main import main

if __name__ == "__main__":
    raise SystemExit(main())
