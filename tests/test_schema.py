import json
import threading
from pathlib import Path

from tests._shared_cases import BLOCKS_DOC, LANGUAGES_DOC, TRANSLATIONS_DOC, shared_schema
from zedscripts.schema import (
    SchemaFormatError,
    SchemaLookupError,
    SchemaRegistry,
    SchemaSnapshot,
    load_schema_directory,
    load_schema_snapshot,
)


def test_load_schema_snapshot_reads_block_fields_and_id_aliases() -> None:
    schema = shared_schema()

    component = schema.block("component")
    assert component.should_have_parent is True
    assert component.parents == ("item",)
    assert component.id_spec is not None
    assert component.id_spec.valid_values == ("FluidContainer", "Durability")
    assert component.id_spec.id_becomes_subtype is True

    model = schema.block("model")
    assert model.id_spec is not None
    assert model.id_spec.parents_exempt_from_id == ("item",)
    assert model.requires_id("module") is True
    assert model.requires_id("ITEM") is False
    assert model.parents_allowing_id() == ("module",)

    assert schema.block("recipe").needs_children == ("inputs", "outputs")


def test_block_lookup_is_case_insensitive() -> None:
    schema = shared_schema()

    assert schema.is_block("Module")
    assert schema.find_block("COMPONENT FLUIDCONTAINER") is schema.block("component FluidContainer")
    assert schema.block("ITEM").name == "item"
    assert "component FluidContainer" in schema.block_names


def test_parameters_absent_disables_unknown_checks_but_empty_does_not() -> None:
    schema = shared_schema()

    assert schema.block("module").parameters is None
    assert schema.block("component").parameters == {}
    item = schema.block("item")
    tags = item.parameter("tags")
    assert tags is not None and tags.allowed_duplicate is True
    icon = item.parameter("ICON")
    assert icon is not None and icon.can_be_empty is True
    assert item.parameter("Durability") is None


def test_block_lookup_raises_for_unknown_types() -> None:
    schema = shared_schema()

    assert schema.find_block("weapon") is None
    try:
        schema.block("weapon")
    except SchemaLookupError as exc:
        assert "is_block()" in str(exc)
    else:
        raise AssertionError("Expected SchemaLookupError for an unknown block type")


def test_resolve_block_falls_back_to_the_raw_type() -> None:
    schema = shared_schema()

    assert schema.resolve_block("component FluidContainer", "component").name == "component FluidContainer"
    assert schema.resolve_block("component Durability", "component").name == "component"


def test_translations_are_keyed_by_file_prefix() -> None:
    schema = shared_schema()

    assert schema.file_prefixes == ("ItemName_", "UI_")
    assert schema.is_translation_prefix("UI_")
    assert not schema.is_translation_prefix("UI")
    assert schema.translation("ItemName_").key == "ItemName"
    assert schema.language_codes == ("DE", "EN", "FR")
    assert schema.languages["FR"].language_name == "Français"


def test_load_schema_snapshot_rejects_non_mapping_documents() -> None:
    for blocks, translations in (
        (["module"], None),
        ({"module": "not a mapping"}, None),
        ({}, {"UI": {"name": "UI"}}),
    ):
        try:
            load_schema_snapshot(blocks, translations)
        except SchemaFormatError:
            pass
        else:
            raise AssertionError(f"Expected SchemaFormatError for {blocks!r} / {translations!r}")


def test_load_schema_directory_reads_json_documents(tmp_path: Path) -> None:
    (tmp_path / "scriptBlocks.json").write_text(json.dumps(BLOCKS_DOC), encoding="utf-8")
    (tmp_path / "translationFiles.json").write_text(json.dumps(TRANSLATIONS_DOC), encoding="utf-8")
    (tmp_path / "languageCodes.json").write_text(json.dumps(LANGUAGES_DOC), encoding="utf-8")

    schema = load_schema_directory(tmp_path)

    assert schema == shared_schema()


def test_load_schema_directory_tolerates_missing_optional_documents(tmp_path: Path) -> None:
    (tmp_path / "scriptBlocks.json").write_text(json.dumps(BLOCKS_DOC), encoding="utf-8")

    schema = load_schema_directory(tmp_path)

    assert schema.is_block("item")
    assert schema.translations == {}
    assert schema.languages == {}


def test_registry_replace_returns_previous_snapshot_and_bumps_generation() -> None:
    registry = SchemaRegistry()
    assert registry.snapshot == SchemaSnapshot()
    assert registry.generation == 0

    first = shared_schema()
    second = load_schema_snapshot({"basket": {"name": "basket"}})

    assert registry.replace(first) == SchemaSnapshot()
    assert registry.replace(second) is first
    assert registry.snapshot is second
    assert registry.generation == 2


def test_registry_readers_only_see_whole_snapshots() -> None:
    old = shared_schema()
    new = load_schema_snapshot({"basket": {"name": "basket"}})
    registry = SchemaRegistry(old)
    seen: list[SchemaSnapshot] = []

    def _read() -> None:
        for _ in range(200):
            seen.append(registry.snapshot)

    readers = [threading.Thread(target=_read) for _ in range(4)]
    for reader in readers:
        reader.start()
    registry.replace(new)
    for reader in readers:
        reader.join()

    assert all(snapshot is old or snapshot is new for snapshot in seen)
    assert registry.snapshot is new
