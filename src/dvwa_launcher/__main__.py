#!/usr/bin/env python3
"""Allow ``python -m dvwa_launcher``.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from dvwa_launcher.cli.app import cli_main

if __name__ == "__main__":
    cli_main()
