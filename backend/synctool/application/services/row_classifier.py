"""Row classification for sync batches.

Client installations export rows with inconsistent key spellings, so every
logical field is looked up through an ordered group of aliases, matched
case-insensitively. The first alias holding a non-empty value wins.

Classification is pure: it never touches storage, so the sync engine can
decide what to write before it writes anything.
"""

from collections.abc import Mapping
from typing import Any

from synctool.domain.entities import ClassifiedRow, CredentialRow, MasterRow, SkippedRow

# Logical field → aliases, in lookup order (already lower-cased)
CREDENTIAL_ID_ALIASES = ("id",)
CREDENTIAL_PASS_ALIASES = ("pass",)
CODE_ALIASES = ("code",)
NAME_ALIASES = ("name",)
ADDRESS_ALIASES = ("address",)
PLACE_ALIASES = ("place", "branch")
SUPER_CODE_ALIASES = ("supercode", "super_code")


class _AliasLookup:
    """Case-insensitive view over one input row, built once per row."""

    def __init__(self, row: Mapping[str, Any]):
        self._values: dict[str, list[Any]] = {}
        for key, value in row.items():
            self._values.setdefault(str(key).lower(), []).append(value)

    def get(self, aliases: tuple[str, ...]) -> str | None:
        for alias in aliases:
            for value in self._values.get(alias, ()):
                text = _as_text(value)
                if text:
                    return text
        return None


def _as_text(value: Any) -> str | None:
    """Render a scalar cell as text, unchanged; blank cells become None."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    text = str(value)
    return text if text.strip() else None


def classify_row(row: Mapping[str, Any]) -> ClassifiedRow:
    """Decide which destination table a row belongs to.

    A row carrying both a user id and a password is a credential row.
    Anything else is a master row, provided it has a code.
    """
    fields = _AliasLookup(row)

    user_id = fields.get(CREDENTIAL_ID_ALIASES)
    password = fields.get(CREDENTIAL_PASS_ALIASES)
    if user_id and password:
        return CredentialRow(user_id=user_id, password=password)

    code = fields.get(CODE_ALIASES)
    if not code:
        return SkippedRow(reason="missing code")

    return MasterRow(
        code=code,
        name=fields.get(NAME_ALIASES),
        address=fields.get(ADDRESS_ALIASES),
        place=fields.get(PLACE_ALIASES),
        super_code=fields.get(SUPER_CODE_ALIASES),
    )
