"""
Tune records and the JSON decoder that produces them.

Input is a JSON array of objects as exported from a tune-sharing site:

    [{"tune_id": "1", "setting_id": "1", "name": "Cooley's", "type": "reel",
      "meter": "4/4", "mode": "Edorian", "abc": "|:D2|EB...", ...}, ...]

Decoding is all-or-nothing: one malformed element fails the whole load.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import List, Union

from .errors import DecodeError, InputReadError


@dataclass(frozen=True)
class Tune:
    """A single tune setting."""
    tune_id: str = ''
    setting_id: str = ''  # ABC X: field, also used in filenames
    name: str = ''
    type: str = ''  # rhythm, e.g. 'reel', 'jig'
    meter: str = ''
    mode: str = ''  # free-form, e.g. 'Gmajor', 'Ador'
    abc: str = ''  # notation body, copied verbatim
    date: str = ''
    username: str = ''

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> 'Tune':
        """Build a Tune from one decoded JSON object.

        Absent keys and nulls become empty strings. Any other non-string
        value raises DecodeError.
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"Element {index} is a {type(data).__name__}, expected an object"
            )

        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                value = ''
            elif not isinstance(value, str):
                raise DecodeError(
                    f"Element {index}: field '{f.name}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[f.name] = value

        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def parse_tunes(text: str) -> List[Tune]:
    """Decode a JSON array of tune objects"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a JSON array of tunes, got {type(data).__name__}"
        )

    return [Tune.from_dict(item, i) for i, item in enumerate(data)]


def load_tunes(path: Union[str, Path]) -> List[Tune]:
    """Read and decode a tunes JSON file"""
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Error reading file {path}: {e}") from e

    return parse_tunes(text)
