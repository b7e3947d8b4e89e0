# -*- coding: utf-8 -*-
"""yapMath: analytic geometry, closed-form solvers and parametric curves."""

from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("yapMath")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
