"""Validation modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ValidationMode(StrEnum):
    """Top-level validator behavior profile."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Feature flags controlling scanning and rule coverage."""

    mode: ValidationMode = ValidationMode.STRICT
    mask_comments: bool = True
    check_parameters: bool = True
    translation_comment_prefixes: tuple[str, ...] = ("--", "//", "/*", "*")

    @staticmethod
    def for_mode(mode: ValidationMode) -> "ValidationOptions":
        if mode == ValidationMode.LENIENT:
            return ValidationOptions(mode=mode, check_parameters=False)
        return ValidationOptions(mode=mode)
