"""Document classification by path."""

from __future__ import annotations

import re
from enum import StrEnum

from zedscripts.translation import TRANSLATION_PATH_RE

SCRIPT_PATH_RE = re.compile(r"(?:^|/)media/scripts/(?:.+/)?[^/]+\.txt$")


class DocumentKind(StrEnum):
    SCRIPT = "script"
    TRANSLATION = "translation"
    UNKNOWN = "unknown"


def classify_document(path: str) -> DocumentKind:
    normalized = path.replace("\\", "/")
    if TRANSLATION_PATH_RE.search(normalized):
        return DocumentKind.TRANSLATION
    if SCRIPT_PATH_RE.search(normalized):
        return DocumentKind.SCRIPT
    return DocumentKind.UNKNOWN
