#!/usr/bin/env python3
"""
chordsheet - transpose and clean up ChordPro-style chord sheets
"""

import argparse
import json
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional

import yaml

from .chord import parse_token
from .config import DISPLAY_MODES, META_FORMATS, Config, ConfigError, load_config
from .directives import extract_meta
from .layout import to_lyrics, to_overlay
from .lines import strip_chordpro_directives
from .song import build_song_view
from .transpose import clamp_transpose, extract_chords, format_signed, transpose_chordpro


EPILOG = """
Examples:
  chordsheet transpose song.pro --steps 2          # up a whole step
  chordsheet transpose song.pro -s -3 -o out.pro   # down a minor third
  chordsheet meta song.pro --format json           # {title: ...} directives
  chordsheet strip song.pro                        # lyrics + chords, no directives
  chordsheet show song.pro -s 2 --mode overlay     # chords above the lyrics
  cat song.pro | chordsheet chords - --top 5       # most used chords
"""


def read_input(source: str) -> str:
    """Read a chord sheet from a path, or stdin for '-'"""
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8') as f:
        return f.read()


def write_output(text: str, output: Optional[str], verbose: int = 0):
    if output:
        output_path = Path(output)
        output_path.write_text(text, encoding='utf-8')
        if verbose >= 1:
            print(f"Written to: {output_path}", file=sys.stderr)
    else:
        sys.stdout.write(text)
        if text and not text.endswith('\n'):
            sys.stdout.write('\n')


def cmd_transpose(args: argparse.Namespace, config: Config) -> int:
    content = read_input(args.input)

    steps = args.steps
    if not args.no_clamp:
        steps = clamp_transpose(steps, config.transpose_min, config.transpose_max)
        if steps != args.steps and args.verbose >= 1:
            print(f"Clamped {format_signed(args.steps)} to {format_signed(steps)}", file=sys.stderr)

    if args.verbose >= 1:
        print(f"Transposing {args.input} by {format_signed(steps)}", file=sys.stderr)

    write_output(transpose_chordpro(content, steps), args.output, args.verbose)
    return 0


def format_meta(meta: dict, output_format: str) -> str:
    if output_format == 'json':
        return json.dumps(meta, indent=2, ensure_ascii=False) + '\n'
    if output_format == 'yaml':
        if not meta:
            return ''
        return yaml.safe_dump(meta, sort_keys=False, allow_unicode=True)

    width = max((len(key) for key in meta), default=0)
    return ''.join(f"{key:{width}}  {value}\n" for key, value in meta.items())


def cmd_meta(args: argparse.Namespace, config: Config) -> int:
    meta = extract_meta(read_input(args.input))
    write_output(format_meta(meta, args.format or config.meta_format), args.output, args.verbose)
    return 0


def cmd_strip(args: argparse.Namespace, config: Config) -> int:
    write_output(strip_chordpro_directives(read_input(args.input)), args.output, args.verbose)
    return 0


def cmd_show(args: argparse.Namespace, config: Config) -> int:
    content = read_input(args.input)
    view = build_song_view(
        content,
        steps=args.steps,
        key=args.key,
        min_steps=config.transpose_min,
        max_steps=config.transpose_max,
    )
    mode = args.mode or config.display_mode

    if mode == 'overlay':
        lines = to_overlay(view.body)
    elif mode == 'lyrics':
        lines = to_lyrics(view.body)
    else:
        lines = view.lines

    header = []
    if 'title' in view.metadata:
        header.append(view.metadata['title'])
    header.append(f"{view.key_display}  ({view.steps_display})")
    header.append('')

    write_output('\n'.join(header + lines) + '\n', args.output, args.verbose)
    return 0


def count_chords(content: str, steps: int = 0) -> Counter:
    """Count chord annotations, re-spelled so Db and C# count together.

    Bracket text that isn't a chord (N.C., x2) is left out.
    """
    counts = Counter()
    for raw in extract_chords(content):
        token = parse_token(raw)
        if token.is_chord:
            counts[str(token.transpose(steps))] += 1
    return counts


def cmd_chords(args: argparse.Namespace, config: Config) -> int:
    counts = count_chords(read_input(args.input), args.steps)
    top_chords = dict(counts.most_common(args.top))

    if args.format == 'json':
        output_text = json.dumps(top_chords, indent=2) + '\n'
    elif not top_chords:
        output_text = "No chords found.\n"
    else:
        lines = ["Chord Counts:\n", "-" * 30 + "\n"]
        for chord, count in top_chords.items():
            lines.append(f"{chord:15} {count:>6}\n")
        output_text = ''.join(lines)

    write_output(output_text, args.output, args.verbose)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='chordsheet',
        description='Transpose, inspect and clean up ChordPro-style chord sheets',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='YAML config file (default: $CHORDSHEET_CONFIG or ./chordsheet.yaml)'
    )

    # Options shared by every sub-command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('input', help="Chord sheet file, or '-' for stdin")
    common.add_argument(
        '-o', '--output',
        default=None,
        help='Output file path (default: print to stdout)'
    )
    common.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Print progress to stderr'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    transpose = subparsers.add_parser('transpose', parents=[common], help='Shift every chord by N semitones')
    transpose.add_argument('-s', '--steps', type=int, required=True, metavar='N',
                           help='Semitones to shift (negative for down)')
    transpose.add_argument('--no-clamp', action='store_true',
                           help='Do not limit steps to the configured range')
    transpose.set_defaults(func=cmd_transpose)

    meta = subparsers.add_parser('meta', parents=[common], help='List {key: value} directives')
    meta.add_argument('-f', '--format', choices=META_FORMATS, default=None,
                      help='Output format (default: from config, else text)')
    meta.set_defaults(func=cmd_meta)

    strip = subparsers.add_parser('strip', parents=[common], help='Drop directive and comment lines')
    strip.set_defaults(func=cmd_strip)

    show = subparsers.add_parser('show', parents=[common], help='Render a song for reading')
    show.add_argument('-s', '--steps', type=int, default=0, metavar='N',
                      help='Semitones to shift (default: 0)')
    show.add_argument('-k', '--key', default=None,
                      help='Original key, if the song has no {key:} directive')
    show.add_argument('-m', '--mode', choices=DISPLAY_MODES, default=None,
                      help='Layout (default: from config, else inline)')
    show.set_defaults(func=cmd_show)

    chords = subparsers.add_parser('chords', parents=[common], help='Count chord usage')
    chords.add_argument('-t', '--top', type=int, default=20, metavar='N',
                        help='Show top N most common chords (default: 20)')
    chords.add_argument('-s', '--steps', type=int, default=0, metavar='N',
                        help='Count as if transposed by N semitones')
    chords.add_argument('-f', '--format', choices=['text', 'json'], default='text',
                        help='Output format (default: text)')
    chords.set_defaults(func=cmd_chords)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return args.func(args, config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
