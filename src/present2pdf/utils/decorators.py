#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/decorators.py
"""Decorators and context managers shared by the parser and renderer.

``requires_dependencies`` guards the entry points that lazily import
third-party packages (mistune for Markdown decks, ReportLab, Pygments and
BeautifulSoup for PDF output) so a missing package surfaces as a
:class:`~present2pdf.exceptions.DependencyError` with an install hint
instead of an ``ImportError`` from deep inside a render.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from importlib import metadata
from typing import Any, Callable, Iterator, List, Optional, Tuple

from packaging.specifiers import SpecifierSet
from packaging.version import Version

from present2pdf.exceptions import DependencyError

# (distribution name, import name, version specifier)
PackageSpec = Tuple[str, str, str]


def installed_version(dist_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None when it is absent."""
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return None


def _check_packages(
    packages: List[PackageSpec],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    missing: list[tuple[str, str]] = []
    outdated: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for dist_name, module_name, spec in packages:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            missing.append((dist_name, spec))
            first_error = first_error or e
            continue
        if spec:
            installed = installed_version(dist_name)
            if installed is None or Version(installed) not in SpecifierSet(spec):
                outdated.append((dist_name, spec, installed or "unknown"))

    return missing, outdated, first_error


def requires_dependencies(converter_name: str, packages: List[PackageSpec]) -> Callable:
    """Fail fast with DependencyError when a wrapped call's packages are unusable.

    Parameters
    ----------
    converter_name : str
        Component name shown in the error, e.g. ``"present"`` or ``"pdf_render"``
    packages : list of tuple
        ``(distribution, module, version_spec)`` entries, such as
        ``("beautifulsoup4", "bs4", "")``. An empty spec accepts any version.

    Returns
    -------
    Callable
        Decorator for the method

    Examples
    --------
        >>> @requires_dependencies("present", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, source):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, outdated, first_error = _check_packages(packages)
            if missing or outdated:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=outdated,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log how long the block took, at DEBUG level only."""
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    started = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - started:.2f}s")
