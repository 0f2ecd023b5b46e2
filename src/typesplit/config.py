from __future__ import annotations

import tomllib as toml
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from typesplit.utility import ConfigurationError, UserInputError
from typesplit.workspace import profiles_dir

# section -> {key: expected type}
_SCHEMA: dict[str, dict[str, type]] = {
    "OUTPUT": {"DIRECTORY": str, "PREFIX": str, "APPEND": bool},
    "STATISTICS": {"MODE": str},
    "DISPLAY": {"COLOR": bool},
    "BEHAVIOUR": {"DEBUG": bool},
}


@dataclass
class Settings:
    """
    Wrap the full TOML dict (without the [_PROFILE_] section).
    .as_dict() feeds runtime.apply().

    Added fields:
      - name:        resolved profile name (FILE.stem if not provided in [_PROFILE_])
      - description: one-line description from [_PROFILE_] or "(no description)"
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- Paths -----------------------------------------------------------------

def _profile_path(name: str) -> Path:
    return profiles_dir() / f"{name}.toml"


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except (OSError, toml.TOMLDecodeError) as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", None) or getattr(e, "strerror", None) or str(e)
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


# --- Metadata handling -----------------------------------------------------


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _split_profile_data(raw: dict[str, Any], fallback_name: str) -> tuple[dict[str, Any], str, str]:
    """
    Extract [_PROFILE_] meta (name, description) and return:
      (settings_without_profile, resolved_name, resolved_description)
    """
    meta = raw.get("_PROFILE_") or {}
    if "_PROFILE_" in raw:
        raw = {k: v for k, v in raw.items() if k != "_PROFILE_"}

    name = str(meta.get("name") or fallback_name)
    description = _sanitize_oneline(str(meta.get("description") or ""))

    return raw, name, description


def _check_types(data: dict[str, Any], source: str) -> None:
    for section, keys in _SCHEMA.items():
        block = data.get(section)
        if block is None:
            continue
        if not isinstance(block, dict):
            raise UserInputError(f"reading {source}: [{section}] must be a table.")
        for key, expected in keys.items():
            if key in block and not isinstance(block[key], expected):
                raise UserInputError(
                    f"reading {source}: {section}.{key} must be {expected.__name__}, "
                    f"got {type(block[key]).__name__}."
                )


# --- Public API ------------------------------------------------------------


def list_profiles_with_descriptions() -> list[tuple[str, str]]:
    """
    Return [(name, description), ...] for all profiles.
    Profiles lacking [_PROFILE_] get "(no description)".
    """
    pdir = profiles_dir()
    if not pdir.exists():
        return []
    items: list[tuple[str, str]] = []
    for p in pdir.glob("*.toml"):
        try:
            raw = _load_toml(p)
            _, nm, desc = _split_profile_data(raw, p.stem)
            items.append((nm, desc))
        except UserInputError:
            # Best-effort listing; fall back to filename
            items.append((p.stem, "(unreadable profile)"))
    return sorted(items, key=lambda t: t[0].lower())


def load_settings(name: str | None) -> Settings:
    """
    Load a profile by name (default 'default'), strip the [_PROFILE_] metadata,
    check value types and return Settings(data=..., name=..., description=..., _source=path).

    A missing 'default' profile yields empty settings; a missing explicit
    profile is a ConfigurationError.
    """
    explicit = bool(name)
    if not name:
        name = "default"

    path = _profile_path(name)
    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Profile '{name}' not found at {path}")
        return Settings(data={}, name="default", description="(built-in defaults)")

    raw = _load_toml(path)

    # Pull out metadata (name/description) and remove [_PROFILE_] from settings
    data, resolved_name, description = _split_profile_data(raw, path.stem)
    _check_types(data, path.name)

    return Settings(
        data=data,
        name=resolved_name,
        description=description,
        _source=path,
    )
