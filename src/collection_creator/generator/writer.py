"""Serializes a collection and writes it to disk."""

from pathlib import Path

from pydantic_core import PydanticSerializationError

from collection_creator.collection.models import Collection
from collection_creator.errors import SerializationError


def render_collection(collection: Collection) -> str:
    """Pretty-print a collection as JSON, omitting unset optional fields."""
    try:
        return collection.model_dump_json(indent=2, by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise SerializationError(f"cannot encode collection: {e}") from e


def write_collection(collection: Collection, output_path: str | Path) -> str:
    """Write the collection to ``output_path`` and return its absolute path.

    Any existing file is removed first. The write is not atomic.
    """
    text = render_collection(collection)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.unlink(missing_ok=True)
    path.write_text(text, encoding="utf-8")

    return str(path.absolute())
