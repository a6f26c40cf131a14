"""Schema documents and script sources shared across tests."""

from __future__ import annotations

import textwrap
from typing import Any

from zedscripts.schema import SchemaSnapshot, load_schema_snapshot


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


BLOCKS_DOC: dict[str, Any] = {
    "module": {
        "name": "module",
        "description": "Top level container of every script.",
        "shouldHaveParent": False,
        "parents": [],
        "ID": {},
    },
    "imports": {
        "name": "imports",
        "description": "Modules imported by this module.",
        "shouldHaveParent": True,
        "parents": ["module"],
    },
    "item": {
        "name": "item",
        "description": "An inventory item.",
        "shouldHaveParent": True,
        "parents": ["module"],
        "ID": {},
        "parameters": {
            "DisplayName": {"description": "Name shown in game."},
            "Weight": {"description": "Item weight."},
            "Tags": {"description": "Item tags.", "allowedDuplicate": True},
            "Icon": {"description": "Icon name.", "canBeEmpty": True},
        },
    },
    "component": {
        "name": "component",
        "description": "Item component.",
        "shouldHaveParent": True,
        "parents": ["item"],
        "ID": {"values": ["FluidContainer", "Durability"], "asType": True},
        "parameters": {},
    },
    "component FluidContainer": {
        "name": "component FluidContainer",
        "description": "Fluid container component.",
        "shouldHaveParent": True,
        "parents": ["item"],
        "parameters": {
            "Capacity": {"description": "Capacity in litres."},
        },
    },
    "fluids": {
        "name": "fluids",
        "description": "Fluids held by a container.",
        "shouldHaveParent": True,
        "parents": ["component FluidContainer"],
    },
    "model": {
        "name": "model",
        "description": "A 3D model.",
        "shouldHaveParent": True,
        "parents": ["module", "item"],
        "ID": {"parentsWithout": ["item"]},
    },
    "recipe": {
        "name": "recipe",
        "description": "A crafting recipe.",
        "shouldHaveParent": True,
        "parents": ["module"],
        "needsChildren": ["inputs", "outputs"],
        "ID": {},
        "parameters": {
            "time": {"description": "Crafting time."},
        },
    },
    "inputs": {
        "name": "inputs",
        "description": "Recipe inputs.",
        "shouldHaveParent": True,
        "parents": ["recipe"],
    },
    "outputs": {
        "name": "outputs",
        "description": "Recipe outputs.",
        "shouldHaveParent": True,
        "parents": ["recipe"],
    },
    "palette": {
        "name": "palette",
        "description": "Parameter rule playground.",
        "shouldHaveParent": False,
        "parameters": {
            "color": {"allowedDuplicate": False},
            "name": {},
            "note": {"canBeEmpty": True},
        },
    },
}

TRANSLATIONS_DOC: dict[str, Any] = {
    "UI": {
        "name": "UI",
        "description": "User interface strings.",
        "filePrefix": "UI_",
        "fileStarter": "UI_",
    },
    "ItemName": {
        "name": "ItemName",
        "description": "Item display names.",
        "filePrefix": "ItemName_",
        "fileStarter": "ItemName_",
    },
}

LANGUAGES_DOC: dict[str, Any] = {
    "EN": {"name": "English", "languageName": "English", "encoding": "UTF-8"},
    "FR": {"name": "French", "languageName": "Français", "encoding": "UTF-8"},
    "DE": {"name": "German", "languageName": "Deutsch", "encoding": "UTF-8"},
}


def shared_schema() -> SchemaSnapshot:
    return load_schema_snapshot(BLOCKS_DOC, TRANSLATIONS_DOC, LANGUAGES_DOC)


VALID_SCRIPT = _dedent(
    """
    /* Base module with one item and one recipe */
    module Base
    {
        imports
        {
            Base
        }

        item Axe
        {
            DisplayName = Axe,
            Weight = 3,
            Tags = Chop,
            Tags = Tool,
            Icon = ,

            component FluidContainer
            {
                Capacity = 1.0,

                fluids
                {
                }
            }

            model
            {
            }
        }

        recipe Make Spear
        {
            time = 50,
            inputs
            {
            }
            outputs
            {
            }
        }

        model AxeModel
        {
        }
    }
    """
)

TRANSLATION_PATH = "/game/media/lua/shared/Translate/EN/UI_EN.txt"
