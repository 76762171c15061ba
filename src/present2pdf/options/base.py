#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Frozen option dataclasses shared by the parser and the renderer."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from present2pdf.constants import DEFAULT_CREATOR


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Adds ``create_updated`` to frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Field validation in ``__post_init__`` runs again on the copy, so an
        invalid override raises ``ValueError``.
        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options every renderer understands.

    Parameters
    ----------
    fail_on_resource_errors : bool, default False
        Raise ImageResourceError when an image is missing, unsupported or
        unreadable. By default the image is skipped with a diagnostic.
    creator : str or None, default "present2pdf"
        Creator application name written to the PDF metadata.

    """

    fail_on_resource_errors: bool = field(
        default=False,
        metadata={
            "help": "Stop with an error when an image cannot be drawn instead of skipping it",
            "importance": "advanced",
        },
    )
    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={
            "help": "Creator written to the PDF metadata; None leaves it unset",
            "importance": "core",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options every parser understands. Currently none."""

    def __post_init__(self) -> None:
        pass
