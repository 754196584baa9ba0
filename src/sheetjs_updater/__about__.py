# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
__version__ = "0.1.0"
