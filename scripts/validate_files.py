#!/usr/bin/env python3
"""Validate script and translation files from disk against a schema directory."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from zedscripts.diagnostics import has_errors
from zedscripts.pipeline import DocumentKind, classify_document, validate_document
from zedscripts.schema import SchemaRegistry, load_schema_directory
from zedscripts.text import LineIndex

logger = logging.getLogger("validate_files")


def _collect_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(candidate for candidate in path.rglob("*.txt") if candidate.is_file()))
        elif path.is_file():
            files.append(path)
    return [path for path in files if classify_document(path.as_posix()) != DocumentKind.UNKNOWN]


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate script and translation files")
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to validate")
    parser.add_argument(
        "--schema-dir",
        type=Path,
        required=True,
        help="Directory holding scriptBlocks.json, translationFiles.json and languageCodes.json",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    schema_dir: Path = args.schema_dir
    if not (schema_dir / "scriptBlocks.json").is_file():
        raise SystemExit(f"Invalid --schema-dir: {schema_dir} has no scriptBlocks.json")
    registry = SchemaRegistry(load_schema_directory(schema_dir))

    files = _collect_files(args.paths)
    if not files:
        raise SystemExit("No script or translation files found")

    failed = False
    total_diagnostics = 0
    iterator = files if args.no_progress else tqdm(files, desc="validate", unit="file")
    for path in iterator:
        text = path.read_text(encoding="utf-8", errors="replace")
        result = validate_document(text, path.as_posix(), registry)
        if result is None:
            continue
        line_index = LineIndex(text)
        for diagnostic in result.diagnostics:
            line, character = line_index.position_at(diagnostic.range.start)
            tqdm.write(f"{path}:{line + 1}:{character + 1}: {diagnostic.severity}: {diagnostic.message} [{diagnostic.code}]")
        total_diagnostics += len(result.diagnostics)
        failed = failed or has_errors(result.diagnostics)

    logger.info("Validated %d files, %d diagnostics", len(files), total_diagnostics)
    print(f"Files: {len(files)}")
    print(f"Diagnostics: {total_diagnostics}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
