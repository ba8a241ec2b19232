"""Console script for indenty."""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

import yaml
from pydantic import ValidationError

from indenty.config import env_help, get_width, get_log_level, positive_int, INDENT_ENV
from indenty.errors import IndentyError
from indenty.forest import build_forest
from indenty.lines import LineCounter, lines_to_pairs, flatten_to_text
from indenty.models.forest import ForestModel
from indenty.tree import render_forest
from indenty.yaml import load_yaml, dump_yaml

FORMATS = ['tree', 'inline', 'json', 'yaml']


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='indenty',
        description='Turns indented lines into trees, and back',
        epilog=env_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='cmd')
    subparsers.required = True

    build_cmd = subparsers.add_parser('build', help='Build trees from the indentation of each line')
    build_cmd.add_argument('file', nargs='?', type=argparse.FileType('r', encoding='utf-8'), default='-',
                           help='Indented text. Default: stdin')
    build_cmd.add_argument('-f', '--format', default='tree', choices=FORMATS,
                           help='Output format. Default: tree')
    build_cmd.add_argument('-w', '--width', type=int, default=None,
                           help='Width for the tree and inline formats. Default: $INDENTY_WIDTH')

    flatten_cmd = subparsers.add_parser('flatten', help='Turn JSON or YAML trees back into indented lines')
    flatten_cmd.add_argument('file', nargs='?', type=argparse.FileType('r', encoding='utf-8'), default='-',
                             help='JSON or YAML trees, as written by `indenty build`. Default: stdin')
    flatten_cmd.add_argument('-i', '--indent', default=None,
                             help='Indentation for each level. Default: $INDENTY_INDENT')

    return parser


def run_build(fh: TextIO, format_: str, width: int) -> int:
    counter = LineCounter(fh)
    try:
        forest = build_forest(lines_to_pairs(counter))
    except IndentyError as e:
        print(f"Error: line {counter.line_number}: {str(e)}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: can't decode {fh.name!r}: {str(e)}", file=sys.stderr)
        return 1

    if format_ in ('tree', 'inline'):
        if forest:
            print(render_forest(forest, vertical=(format_ == 'tree'), width=width))
    elif format_ == 'json':
        print(ForestModel.from_forest(forest).json(indent=2))
    elif format_ == 'yaml':
        print(dump_yaml(ForestModel.from_forest(forest).dict()), end='')
    else:
        raise NotImplementedError()

    return 0


def run_flatten(fh: TextIO, indent: str) -> int:
    if not indent:
        print('Error: the indentation for each level can\'t be empty', file=sys.stderr)
        return 1
    try:
        forest_model = ForestModel.parse_data(load_yaml(fh))
    except yaml.YAMLError as e:
        print(f"Error: can't parse {fh.name!r}: {str(e)}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: {fh.name!r} doesn't contain trees: {str(e)}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: can't decode {fh.name!r}: {str(e)}", file=sys.stderr)
        return 1

    print(flatten_to_text(forest_model.to_forest(), indent), end='')
    return 0


def main(passed_argv: Optional[List[str]] = None) -> int:
    """Console script for indenty."""
    if passed_argv is None:
        argv = sys.argv
    else:
        argv = passed_argv

    args = get_parser().parse_args(argv[1:])

    try:
        try:
            level = get_log_level()
            if args.cmd == 'build':
                if args.width is not None:
                    try:
                        width = positive_int(str(args.width))
                    except ValueError as e:
                        raise ValueError(f"--width {str(e)}") from e
                else:
                    width = get_width()
        except ValueError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            return 1

        logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

        if args.cmd == 'build':
            return run_build(args.file, args.format, width)
        elif args.cmd == 'flatten':
            if args.indent is not None:
                indent = args.indent
            else:
                indent = INDENT_ENV.get()
            return run_flatten(args.file, indent)
        else:
            raise NotImplementedError()
    finally:
        if args.file is not sys.stdin:
            args.file.close()


if __name__ == '__main__':
    exit(main())
