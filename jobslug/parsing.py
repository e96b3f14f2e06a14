"""Value coercion for environment variables and YAML config fields."""

from __future__ import annotations


_BOOLEAN_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def _clean_token(value: object) -> str:
    return "" if value is None else str(value).strip()


def parse_permissive_boolean(value: object) -> bool | None:
    """Return the boolean a config token spells, or `None` when it spells none.

    Tokens are matched case-insensitively after trimming; real booleans pass
    through unchanged.
    """

    if isinstance(value, bool):
        return value
    return _BOOLEAN_TOKENS.get(_clean_token(value).lower())


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Like `parse_permissive_boolean`, but reject unrecognised tokens.

    Raises:
        ValueError: Naming `field_name` when the token is not a boolean.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_word_list(value: object) -> tuple[str, ...]:
    """Parse a comma-separated string or a list into stripped, non-blank words.

    Order is kept and duplicates are dropped; `None` items count as blank.
    """

    if value is None:
        return ()
    raw_items = value.split(",") if isinstance(value, str) else value
    if not isinstance(raw_items, (list, tuple)):
        raise ValueError("Word lists must be a comma-separated string or a list of strings.")

    words = (_clean_token(item) for item in raw_items)
    return tuple(dict.fromkeys(word for word in words if word))
