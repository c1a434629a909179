from __future__ import annotations

from re import Pattern
from typing import Optional

from pydantic import BaseModel


class HeaderDetectionOptions(BaseModel):
    """Caller hints for header detection.

    ``header_pattern`` accepts a regex string or a compiled pattern and is
    matched (``search``) against each candidate row's label value.  With no
    pattern, or no match, the first non-title row is the header.
    ``no_header`` asserts the table has no header row at all.
    """

    model_config = {"frozen": True}

    header_pattern: Optional[Pattern[str]] = None
    no_header: bool = False
