"""
Command-line interface: convert a JSON tune collection to ABC files.
"""

import argparse
import json
import sys
from typing import List, Optional

from . import __version__
from .config import ConvertConfig, load_config_file
from .errors import FileCreateError, Tune2AbcError
from .tune import load_tunes
from .writer import (
    DEFAULT_SINGLE_FILE,
    WriteResult,
    ensure_output_dir,
    write_multiple_files,
    write_single_file,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tune2abc',
        description='Convert a JSON collection of tunes to ABC notation files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One .abc file per tune in abc/
  tune2abc -input tunes.json -output abc/

  # Everything in abc/session.abc
  tune2abc -input tunes.json -output abc/ -single -outfile session.abc

  # Settings from a YAML file, overriding the output directory
  tune2abc -config convert.yaml -output other/
        """,
    )
    # Defaults are None so config file values can fill the gaps
    parser.add_argument('-input', '--input', dest='input',
                        help='Path to the input JSON file')
    parser.add_argument('-output', '--output', dest='output',
                        help='Directory for output ABC files (default: .)')
    parser.add_argument('-single', '--single', dest='single',
                        action='store_true', default=None,
                        help='Output to a single file instead of multiple files')
    parser.add_argument('-multi', '--multi', dest='single',
                        action='store_false', default=None,
                        help='Output one file per tune, overriding single: true in -config')
    parser.add_argument('-outfile', '--outfile', dest='outfile',
                        help=f'Name of the single output file, relative to -output '
                             f'(default: {DEFAULT_SINGLE_FILE})')
    parser.add_argument('-config', '--config', dest='config',
                        help='YAML file with default settings')
    parser.add_argument('-report', '--report', dest='report',
                        help='Write a JSON report of the run to this path')
    parser.add_argument('--version', action='version',
                        version=f'tune2abc {__version__}')
    return parser


def resolve_config(args: argparse.Namespace) -> Optional[ConvertConfig]:
    """Merge flags over config file values over defaults.

    Returns None when no input path was given anywhere.
    """
    file_values = load_config_file(args.config) if args.config else {}

    def pick(name, key, default=None):
        value = getattr(args, name)
        if value is not None:
            return value
        value = file_values.get(key)
        return default if value is None else value

    input_path = pick('input', 'input')
    if not input_path:
        return None

    return ConvertConfig(
        input_path=input_path,
        output_dir=pick('output', 'output', '.'),
        single=bool(pick('single', 'single', False)),
        outfile=pick('outfile', 'outfile', DEFAULT_SINGLE_FILE),
        report_path=pick('report', 'report'),
    )


def save_report(config: ConvertConfig, result: WriteResult) -> None:
    """Save run statistics to a JSON file"""
    report = {
        'input': str(config.input_path),
        'output_dir': str(config.output_dir),
        'mode': config.mode,
        **result.to_dict(),
    }
    try:
        with open(config.report_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)
    except OSError as e:
        raise FileCreateError(f"Error writing report {config.report_path}: {e}") from e
    print(f"Report saved to: {config.report_path}")


def run(config: ConvertConfig) -> WriteResult:
    """Load tunes and write them according to config"""
    tunes = load_tunes(config.input_path)
    print(f"Found {len(tunes)} tunes in the input file")

    if ensure_output_dir(config.output_dir):
        print(f"Created output directory: {config.output_dir}")

    if config.single:
        result = write_single_file(tunes, config.output_dir, config.outfile)
    else:
        result = write_multiple_files(tunes, config.output_dir)

    if config.report_path:
        save_report(config, result)

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
        if config is None:
            print("Please provide an input file with the -input flag", file=sys.stderr)
            parser.print_help(sys.stderr)
            return 1

        run(config)
    except Tune2AbcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
