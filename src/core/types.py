"""Shared type aliases used across the hero image modules."""
from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

Popularity = Annotated[int, Field(ge=0)]
PixelSize = Annotated[int, Field(gt=0)]
PerPage = Annotated[int, Field(ge=1)]
ImageSize = Annotated[
    str,
    StringConstraints(
        pattern=r"^\d{2,4}x\d{2,4}$",
        strip_whitespace=True,
    ),
]
Keyword = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        to_lower=True,
    ),
]
