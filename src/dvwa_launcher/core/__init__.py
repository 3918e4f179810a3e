"""
Core host, shell, docker and error primitives.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""
