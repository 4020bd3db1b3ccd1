"""
Run configuration for the converter.

Settings come from command-line flags, an optional YAML config file, and
built-in defaults, in that order of precedence. A config file looks like:

    input: data/tunes.json
    output: abc/
    single: true
    outfile: session.abc
    report: abc/report.json
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ConfigError
from .writer import DEFAULT_SINGLE_FILE

CONFIG_KEYS = ('input', 'output', 'single', 'outfile', 'report')
PATH_KEYS = ('input', 'output', 'outfile', 'report')


@dataclass(frozen=True)
class ConvertConfig:
    """Resolved settings for one conversion run"""
    input_path: Path
    output_dir: Path = Path('.')
    single: bool = False
    outfile: str = DEFAULT_SINGLE_FILE
    report_path: Optional[Path] = None

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__ for coercion
        object.__setattr__(self, 'input_path', Path(self.input_path))
        object.__setattr__(self, 'output_dir', Path(self.output_dir))
        if self.report_path is not None:
            object.__setattr__(self, 'report_path', Path(self.report_path))

    @property
    def mode(self) -> str:
        return 'single' if self.single else 'multi'


def load_config_file(path: Union[str, Path]) -> dict:
    """Load settings from a YAML config file.

    Returns a dict restricted to CONFIG_KEYS. An empty file yields {}.
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"Unknown keys in config file {path}: {', '.join(unknown)}")

    if 'single' in data and not isinstance(data['single'], bool):
        raise ConfigError(f"'single' in config file {path} must be true or false")

    for key in PATH_KEYS:
        if data.get(key) is not None and not isinstance(data[key], str):
            raise ConfigError(f"'{key}' in config file {path} must be a string")

    return data
