"""Global constants and configuration for the sheet packer.

This module contains the package-wide settings used throughout the packer.
It provides consistent access to the logger namespace and the debug switch.
"""

import os

LOGGER_NAME = "sheet_packer"

DEBUG_ENV_VAR = "SHEET_PACKER_DEBUG"

_truthy_values = ("1", "true", "yes", "on")


def is_debug_enabled() -> bool:
    """Check whether debug output was requested through the environment."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _truthy_values


debug = is_debug_enabled()
