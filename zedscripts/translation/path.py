"""Translation file path convention."""

from __future__ import annotations

import re

from zedscripts.schema import SchemaSnapshot
from zedscripts.translation.model import TranslationPath

TRANSLATION_PATH_RE = re.compile(r"(?:^|/)Translate/(?P<folder>[^/]+)/(?P<name>[^/]+)\.txt$")


def parse_translation_path(path: str, schema: SchemaSnapshot) -> TranslationPath | None:
    """Split a translation file path into folder code, prefix and file code.

    Known schema prefixes are tried longest first; otherwise everything up to
    the last `_` is taken as the prefix so it can be reported as invalid.
    """
    match = TRANSLATION_PATH_RE.search(path.replace("\\", "/"))
    if match is None:
        return None
    folder_code = match.group("folder")
    file_name = match.group("name")

    for prefix in sorted(schema.translations, key=len, reverse=True):
        if prefix and file_name.startswith(prefix) and len(file_name) > len(prefix):
            return TranslationPath(
                folder_code=folder_code,
                file_code=file_name[len(prefix) :],
                file_prefix=prefix,
                file_name=file_name,
            )

    prefix, separator, code = file_name.rpartition("_")
    if not separator:
        return TranslationPath(folder_code=folder_code, file_code=file_name, file_prefix="", file_name=file_name)
    return TranslationPath(
        folder_code=folder_code,
        file_code=code,
        file_prefix=prefix + separator,
        file_name=file_name,
    )
