#!/usr/bin/env python
"""Entry point for lead generation CLI.

The .env file is loaded by main() so the console script gets it too.
"""

from leadgen.core.cli import main

if __name__ == "__main__":
    main()
