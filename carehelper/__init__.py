# SPDX-License-Identifier: Apache-2.0
"""carehelper: CarePartner care-job search exposed as an MCP tool."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("carehelper")
except PackageNotFoundError:  # source checkout
    __version__ = "0.0.0+local"

__all__ = ["__version__"]
