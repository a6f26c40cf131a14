"""Document validation entrypoints, result carriers and caching."""

from zedscripts.pipeline.cache import DocumentResultCache
from zedscripts.pipeline.classify import SCRIPT_PATH_RE, DocumentKind, classify_document
from zedscripts.pipeline.entrypoints import (
    validate_document,
    validate_script_document,
    validate_translation_document,
)
from zedscripts.pipeline.results import (
    ScriptValidationResult,
    TranslationValidationResult,
    ValidationResult,
)

__all__ = [
    "SCRIPT_PATH_RE",
    "DocumentKind",
    "DocumentResultCache",
    "ScriptValidationResult",
    "TranslationValidationResult",
    "ValidationResult",
    "classify_document",
    "validate_document",
    "validate_script_document",
    "validate_translation_document",
]
