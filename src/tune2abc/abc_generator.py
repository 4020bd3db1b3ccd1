"""
ABC rendering for tune records.

- normalize_mode(): 'Gmajor' -> 'g', 'Aminor' -> 'am', 'Dmixolydian' -> 'd mix'
- sanitize_filename(): title -> filesystem-safe name
- render_lines() / render_tune(): header fields + verbatim notation body
"""

from typing import Callable, List, Tuple

from .tune import Tune

ModeRule = Tuple[Callable[[str], bool], Callable[[str], str]]


def _church_mode(word: str, abbrev: str) -> ModeRule:
    return (
        lambda mode: word in mode,
        lambda mode: mode.replace(word, f' {abbrev}', 1),
    )


# Order matters: first match wins. 'mixolydian' must be tried before 'lydian'.
MODE_RULES: List[ModeRule] = [
    (lambda mode: mode.endswith('major'), lambda mode: mode[:-len('major')]),
    (lambda mode: mode.endswith('minor'), lambda mode: mode[:-len('minor')] + 'm'),
    _church_mode('mixolydian', 'mix'),
    _church_mode('dorian', 'dor'),
    _church_mode('phrygian', 'phr'),
    _church_mode('lydian', 'lyd'),
    _church_mode('locrian', 'loc'),
]

ILLEGAL_FILENAME_CHARS = ['/', '\\', ':', '*', '?', '"', '<', '>', '|']
MAX_FILENAME_LENGTH = 50


def normalize_mode(mode: str) -> str:
    """Convert a mode string like 'Gmajor' to an ABC K: value.

    Unrecognized modes are returned lowercased.
    """
    mode = mode.lower()
    for matches, transform in MODE_RULES:
        if matches(mode):
            return transform(mode)
    return mode


def sanitize_filename(name: str, max_length: int = MAX_FILENAME_LENGTH) -> str:
    """Replace characters not allowed in filenames and cap the length.

    The cap counts characters, not bytes, so a multi-byte character is
    never split.
    """
    result = name
    for char in ILLEGAL_FILENAME_CHARS:
        result = result.replace(char, '_')

    return result[:max_length]


def tune_filename(tune: Tune) -> str:
    """Per-tune output filename: '<setting_id>_<sanitized name>.abc'"""
    return f"{tune.setting_id}_{sanitize_filename(tune.name)}.abc"


def render_lines(tune: Tune) -> List[str]:
    """ABC header lines in fixed order, followed by the notation body"""
    lines = [
        f"X:{tune.setting_id}",
        f"T:{tune.name}",
        f"R:{tune.type}",
        f"M:{tune.meter}",
        f"K:{normalize_mode(tune.mode)}",
    ]

    if tune.username:
        lines.append(f"Z:{tune.username}")
    if tune.date:
        lines.append(f"H:Added {tune.date}")

    lines.append(tune.abc)
    return lines


def render_tune(tune: Tune) -> str:
    """Render one tune as the text of a standalone .abc file"""
    return '\n'.join(render_lines(tune)) + '\n'
