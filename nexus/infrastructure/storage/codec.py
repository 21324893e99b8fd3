"""Serialization contract for persisted collections.

A collection is stored as a compact JSON array of records with camelCase
field names, enum values as their lowercase strings and timestamps as
integer epoch milliseconds.

Decoding validates instead of trusting the stored text:
- text that is not JSON, or JSON that is not an array, is rejected whole
- each record is validated against its model; bad records are dropped
- a record repeating an earlier record's id is dropped
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from nexus.domain.note import Note
from nexus.domain.shared import Err, Ok, Result
from nexus.domain.task import Task

TASKS_KEY = "nexus_tasks"
NOTES_KEY = "nexus_notes"

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class DecodedCollection(Generic[M]):
    """Records recovered from stored text.

    Attributes:
        records: Valid records in stored order.
        problems: One message per record that was dropped.
    """

    records: list[M]
    problems: list[str] = field(default_factory=list)


def encode_collection(records: Sequence[BaseModel]) -> str:
    """Serialize records to compact JSON text."""
    payload = [r.model_dump(mode="json", by_alias=True) for r in records]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def decode_collection(text: str, model: type[M]) -> Result[DecodedCollection[M], str]:
    """Parse stored text into validated records.

    Args:
        text: Text read from storage.
        model: Record model to validate each element against.

    Returns:
        Ok(DecodedCollection) if the text is a JSON array, even when some
        records had to be dropped. Err(str) if the text is not JSON or
        not an array.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"Invalid JSON: {e}")
    except RecursionError:
        return Err("Invalid JSON: nested too deeply")

    if not isinstance(data, list):
        return Err(f"Expected a JSON array, got {type(data).__name__}")

    records: list[M] = []
    problems: list[str] = []
    seen_ids: set[str] = set()

    for index, raw in enumerate(data):
        try:
            record = model.model_validate(raw)
        except ValidationError as e:
            problems.append(
                f"record {index}: invalid {model.__name__} "
                f"({e.error_count()} validation error(s))"
            )
            continue

        record_id = record.id  # type: ignore[attr-defined]
        if record_id in seen_ids:
            problems.append(f"record {index}: duplicate id {record_id!r}")
            continue
        seen_ids.add(record_id)
        records.append(record)

    return Ok(DecodedCollection(records=records, problems=problems))


def encode_tasks(tasks: Sequence[Task]) -> str:
    """Serialize a task collection."""
    return encode_collection(tasks)


def encode_notes(notes: Sequence[Note]) -> str:
    """Serialize a note collection."""
    return encode_collection(notes)


def decode_tasks(text: str) -> Result[DecodedCollection[Task], str]:
    """Parse a stored task collection."""
    return decode_collection(text, Task)


def decode_notes(text: str) -> Result[DecodedCollection[Note], str]:
    """Parse a stored note collection."""
    return decode_collection(text, Note)
