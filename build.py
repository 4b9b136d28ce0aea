#!/usr/bin/env python3
from blogindex.cli import main

if __name__ == "__main__":
    main()
