"""Export JSON schemas for the scheduler's input and output models."""

import json
from pathlib import Path

from pydantic import BaseModel

from backend.app.models import Itinerary, ItineraryDay, TripLeg

SCHEMA_MODELS: list[type[BaseModel]] = [TripLeg, ItineraryDay, Itinerary]


def export_schemas(schemas_dir: Path) -> list[Path]:
    """Write one ``<Model>.schema.json`` per model into ``schemas_dir``."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for model in SCHEMA_MODELS:
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        written.append(path)
    return written


def main() -> None:
    """Export schemas to docs/schemas/."""
    for path in export_schemas(Path("docs/schemas")):
        print(f"Exported schema to {path}")


if __name__ == "__main__":
    main()
