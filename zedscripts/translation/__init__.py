"""Translation file parsing and validation APIs."""

from zedscripts.translation.model import TranslationEntry, TranslationFile, TranslationPath
from zedscripts.translation.parser import RawTranslationEntry, parse_translation_lines
from zedscripts.translation.path import TRANSLATION_PATH_RE, parse_translation_path
from zedscripts.translation.validator import validate_translation_text

__all__ = [
    "TRANSLATION_PATH_RE",
    "RawTranslationEntry",
    "TranslationEntry",
    "TranslationFile",
    "TranslationPath",
    "parse_translation_lines",
    "parse_translation_path",
    "validate_translation_text",
]
