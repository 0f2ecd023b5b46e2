# tests/test_config.py
"""
Tests for TOML profiles and runtime settings.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from typesplit.config import list_profiles_with_descriptions, load_settings
from typesplit.runtime import APPLY, CFG
from typesplit.runtime import current as _rt_current
from typesplit.utility import ConfigurationError, UserInputError, flatten_dotted
from typesplit.workspace import ensure_workspace, profiles_dir


def _profile(name: str, text: str):
    ensure_workspace()
    p = profiles_dir() / f"{name}.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_missing_default_profile_gives_empty_settings():
    s = load_settings(None)
    assert s.name == "default"
    assert s.as_dict() == {}
    assert s._source is None


def test_missing_explicit_profile_is_configuration_error():
    with pytest.raises(ConfigurationError):
        load_settings("nope")


def test_profile_metadata_is_stripped():
    _profile("dump", """
[_PROFILE_]
name = "Dump"
description = "  append   into out  "

[OUTPUT]
DIRECTORY = "out"
PREFIX = "dump_"
APPEND = true
""")
    s = load_settings("dump")
    assert s.name == "Dump"
    assert s.description == "append into out"
    assert "_PROFILE_" not in s.as_dict()
    assert flatten_dotted(s.as_dict()) == {
        "OUTPUT.DIRECTORY": "out",
        "OUTPUT.PREFIX": "dump_",
        "OUTPUT.APPEND": True,
    }


def test_malformed_toml_names_file_and_line():
    _profile("broken", "[OUTPUT]\nPREFIX = \n")
    with pytest.raises(UserInputError) as ei:
        load_settings("broken")
    assert "broken.toml" in str(ei.value)
    assert "line 2" in str(ei.value)


@pytest.mark.parametrize("body", [
    "[OUTPUT]\nAPPEND = \"yes\"\n",
    "[OUTPUT]\nPREFIX = 3\n",
    "[STATISTICS]\nMODE = true\n",
    "OUTPUT = 1\n",
])
def test_wrong_value_types_are_rejected(body):
    _profile("typed", body)
    with pytest.raises(UserInputError):
        load_settings("typed")


def test_list_profiles_sorted_with_descriptions():
    _profile("zeta", "[_PROFILE_]\ndescription = \"last\"\n")
    _profile("alpha", "")
    _profile("bad", "this is = = not toml")
    assert list_profiles_with_descriptions() == [
        ("alpha", "(no description)"),
        ("bad", "(unreadable profile)"),
        ("zeta", "last"),
    ]


def test_apply_and_dotted_lookup():
    _profile("default", "[DISPLAY]\nCOLOR = false\n[BEHAVIOUR]\nDEBUG = true\n[OUTPUT]\nPREFIX = \"p_\"\n")
    APPLY(load_settings(None))
    rt = _rt_current()
    assert rt.profile_name == "default"
    assert rt.debug is True
    assert rt.color is False
    assert CFG("OUTPUT.PREFIX") == "p_"
    assert CFG("OUTPUT.MISSING", "x") == "x"
    assert CFG("NOPE.DEEP.KEY") is None


def test_apply_keeps_its_own_copy_of_the_profile():
    _profile("named", '[_PROFILE_]\nname = "Named"\n[OUTPUT]\nPREFIX = "n_"\n')
    selected = load_settings("named")
    APPLY(selected)
    rt = _rt_current()
    assert rt.profile_name == "Named"
    rt.settings["OUTPUT"] = {"PREFIX": "changed"}
    assert selected.as_dict()["OUTPUT"] == {"PREFIX": "n_"}
