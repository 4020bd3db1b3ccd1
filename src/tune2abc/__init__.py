"""
tune2abc - Convert tune collections from JSON to ABC notation

Modules:
- tune: Tune records and JSON decoding
- abc_generator: mode normalization, filename sanitizing, ABC rendering
- writer: per-tune or single-file output
- config: run configuration and YAML config files
- cli: command-line entry point
"""

from .abc_generator import (
    normalize_mode,
    render_lines,
    render_tune,
    sanitize_filename,
    tune_filename,
)
from .config import ConvertConfig, load_config_file
from .errors import (
    ConfigError,
    DecodeError,
    FileCreateError,
    InputReadError,
    OutputDirError,
    Tune2AbcError,
)
from .tune import Tune, load_tunes, parse_tunes
from .writer import (
    WriteResult,
    ensure_output_dir,
    write_multiple_files,
    write_single_file,
)

__version__ = "0.1.0"

__all__ = [
    # Records
    'Tune',
    'load_tunes',
    'parse_tunes',
    # Rendering
    'normalize_mode',
    'sanitize_filename',
    'tune_filename',
    'render_lines',
    'render_tune',
    # Output
    'WriteResult',
    'ensure_output_dir',
    'write_multiple_files',
    'write_single_file',
    # Configuration
    'ConvertConfig',
    'load_config_file',
    # Errors
    'Tune2AbcError',
    'InputReadError',
    'DecodeError',
    'OutputDirError',
    'FileCreateError',
    'ConfigError',
]
