"""
Write rendered tunes to disk, one file per tune or all in one file.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .abc_generator import render_tune, tune_filename
from .errors import FileCreateError, OutputDirError
from .tune import Tune

DEFAULT_SINGLE_FILE = 'all_tunes.abc'


@dataclass
class WriteResult:
    """Outcome of a write run"""
    total: int = 0
    written: int = 0
    paths: List[Path] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (filename, error)

    def to_dict(self) -> dict:
        return {
            'total': self.total,
            'written': self.written,
            'paths': [str(p) for p in self.paths],
            'failed': [{'file': name, 'error': error} for name, error in self.failed],
        }


def ensure_output_dir(output_dir: Union[str, Path]) -> bool:
    """Create the output directory (with parents) if needed.

    Returns True if the directory was created by this call.
    """
    output_dir = Path(output_dir)
    if output_dir.is_dir():
        return False

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Error creating output directory {output_dir}: {e}") from e
    return True


def write_tune_file(tune: Tune, output_dir: Path) -> Path:
    """Write one tune to its own .abc file"""
    output_path = output_dir / tune_filename(tune)
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(render_tune(tune))
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte in the path
        raise FileCreateError(f"Error creating output file {output_path}: {e}") from e
    return output_path


def write_multiple_files(tunes: Sequence[Tune], output_dir: Union[str, Path],
                         progress_every: int = 100) -> WriteResult:
    """Write each tune to '<setting_id>_<name>.abc' under output_dir.

    A tune whose file can't be written is reported and skipped.
    """
    output_dir = Path(output_dir)
    result = WriteResult(total=len(tunes))

    for i, tune in enumerate(tunes, 1):
        try:
            path = write_tune_file(tune, output_dir)
        except FileCreateError as e:
            print(str(e), file=sys.stderr)
            result.failed.append((tune_filename(tune), str(e)))
            continue

        result.paths.append(path)
        result.written += 1

        if progress_every and i % progress_every == 0:
            print(f"Processed {i} tunes...")

    print(f"Successfully wrote {result.written} tunes to individual files in {output_dir}")
    return result


def write_single_file(tunes: Sequence[Tune], output_dir: Union[str, Path],
                      filename: str = DEFAULT_SINGLE_FILE) -> WriteResult:
    """Write all tunes to one file, separated by a blank line"""
    output_path = Path(output_dir) / filename

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            for tune in tunes:
                f.write(render_tune(tune))
                f.write('\n')
    except OSError as e:
        raise FileCreateError(f"Error creating output file {output_path}: {e}") from e

    print(f"Successfully wrote {len(tunes)} tunes to {output_path}")
    return WriteResult(total=len(tunes), written=len(tunes), paths=[output_path])
