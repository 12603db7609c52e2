"""Project records - the JSON shape shared by capture input and the gallery."""

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from folio.errors import TargetLoadError
from folio.slug import slugify


class ProjectRecord(BaseModel):
    """``{name, url, categories?, technologies?}``."""

    name: str
    url: str
    categories: list[str] = []
    technologies: list[str] = []

    @property
    def slug(self) -> str:
        return slugify(self.name)


RecordT = TypeVar("RecordT", bound=ProjectRecord)


def read_text(path: Path | str) -> str:
    """Read a UTF-8 input file, wrapping OS and decoding errors in TargetLoadError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise TargetLoadError(path, f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise TargetLoadError(path, f"not UTF-8 text ({e.reason} at byte {e.start})") from e


def parse_records(
    data: object,
    source: Path | str = "<data>",
    model: type[RecordT] = ProjectRecord,
) -> list[RecordT]:
    """Validate decoded JSON as a list of records.

    Args:
        data: Decoded JSON value.
        source: Name used in error messages.
        model: Record class to validate into.

    Returns:
        Records in input order.

    Raises:
        TargetLoadError: If the value is not a list of valid records.
    """
    if not isinstance(data, list):
        raise TargetLoadError(source, "expected a JSON array of {name, url} records")

    records = []
    for index, item in enumerate(data):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise TargetLoadError(source, f"record {index} is invalid: {e.errors()[0]['msg']}") from e
    return records


def load_records(path: Path | str, model: type[RecordT] = ProjectRecord) -> list[RecordT]:
    """Read and validate a JSON file of records."""
    text = read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TargetLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    return parse_records(data, path, model)
