"""Data model for a stored boundary record.

A ``BoundaryRecord`` is the slice of a sector, subsector or cuadrante row
that the geometry code reads: the stored polygon, the manually entered
coordinates and the map colour.  Field names follow the backend payload
(``poligono_json``, ``latitud``, ``longitud``, ``color_mapa``).
"""

from __future__ import annotations

from dataclasses import dataclass

RECORD_KINDS = frozenset({"sector", "subsector", "cuadrante"})


@dataclass(frozen=True, slots=True)
class BoundaryRecord:
    """Boundary fields of a sector / subsector / cuadrante.

    Attributes:
        name: Display name of the record.
        kind: One of ``"sector"``, ``"subsector"``, ``"cuadrante"``.
        poligono_json: Stored boundary, either JSON text or an already
            decoded value.  Left untouched; normalisation happens later.
        latitud: Manually entered latitude (number, decimal string or ``None``).
        longitud: Manually entered longitude (number, decimal string or ``None``).
        color_mapa: Map colour as ``#RRGGBB``; empty means "use the default".
    """

    name: str = ""
    kind: str = "cuadrante"
    poligono_json: object = None
    latitud: object = None
    longitud: object = None
    color_mapa: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> BoundaryRecord:
        """Deserialise from a backend row.

        Missing fields are defaulted.  ``nombre`` is accepted as an alias
        for ``name``.

        Raises:
            TypeError: If ``data`` is not a mapping, or ``kind`` is unknown.
        """
        if not isinstance(data, dict):
            msg = f"record must be a dict, got {type(data).__name__}"
            raise TypeError(msg)

        kind = str(data.get("kind", "cuadrante"))
        if kind not in RECORD_KINDS:
            msg = f"kind must be one of {sorted(RECORD_KINDS)}, got {kind!r}"
            raise TypeError(msg)

        color = data.get("color_mapa")
        return cls(
            name=str(data.get("name") or data.get("nombre") or ""),
            kind=kind,
            poligono_json=data.get("poligono_json"),
            latitud=data.get("latitud"),
            longitud=data.get("longitud"),
            color_mapa=str(color) if color else "",
        )
