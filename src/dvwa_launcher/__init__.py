"""
dvwa-launcher: provision Docker and run DVWA for training labs.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

__version__ = "1.0.0"
