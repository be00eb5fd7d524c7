"""Board document models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class Column(BaseModel):
    """A named lane holding an ordered list of cards.

    Card contents are opaque: whatever the client sends is kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: StrictStr
    cards: list[Any]


class Board(BaseModel):
    """A kanban board as stored in one JSON file.

    The filename is the board's identity; ``name`` is only for display and
    never renames the file. Unknown fields are preserved so a document sent
    by a client is written back exactly as received.
    """

    model_config = ConfigDict(extra="allow")

    # Display only; any JSON value is kept as sent.
    name: Any = None
    columns: list[Column]

    @classmethod
    def with_columns(cls, name: str, column_names: list[str]) -> "Board":
        """Create a new board with empty columns ``col-0``, ``col-1``, ..."""
        return cls(
            name=name,
            columns=[
                Column(id=f"col-{index}", name=column_name, cards=[])
                for index, column_name in enumerate(column_names)
            ],
        )

    def to_document(self) -> dict[str, Any]:
        """Convert to the JSON-ready dict written to disk.

        Only fields that were explicitly given are emitted, so a validated
        client payload round-trips without gaining defaults.
        """
        return self.model_dump(mode="json", exclude_unset=True)

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON (2-space indent)."""
        return self.model_dump_json(indent=2, exclude_unset=True)
