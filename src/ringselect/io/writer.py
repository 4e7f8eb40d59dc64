"""Writer for selection maps."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ringselect.domain import RingIdentifier, RingProperties
from ringselect.exceptions import SelectionSaveError


def selection_to_list(
    selection_map: Mapping[RingIdentifier, RingProperties],
) -> list[dict[str, Any]]:
    """Serialize a selection map as a list sorted by identifier.

    Each entry holds the identifier under "id" next to the ring's
    properties (area, point, within_code, reversed).
    """
    return [
        {"id": ring_id.to_dict(), **selection_map[ring_id].to_dict()}
        for ring_id in sorted(selection_map)
    ]


def selection_from_list(data: list[dict[str, Any]]) -> dict[RingIdentifier, RingProperties]:
    """Inverse of selection_to_list()."""
    return {
        RingIdentifier.from_dict(entry["id"]): RingProperties.from_dict(entry)
        for entry in data
    }


class SelectionWriter:
    """Saves selection maps as JSON.

    Example:
        writer = SelectionWriter(Path("selected.json"))
        writer.save(selection_map, overlay="union")
    """

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(
        self,
        selection_map: Mapping[RingIdentifier, RingProperties],
        overlay: str | None = None,
    ) -> None:
        """Write the selection map.

        Args:
            selection_map: Selected rings
            overlay: Overlay name recorded alongside the rings

        Raises:
            SelectionSaveError: If the file cannot be written
        """
        document: dict[str, Any] = {"rings": selection_to_list(selection_map)}
        if overlay is not None:
            document = {"overlay": overlay, **document}

        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise SelectionSaveError(str(self._output_path), str(e)) from e
