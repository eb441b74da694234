#!/usr/bin/env python3

"""Query the AArch64 reference tables from the command line.

Exits with status 1 if a name is not recognized and with status 2 if the
reference tables passed with `--tables` cannot be read.
"""

import argparse
import logging
import sys

from . import targetparser as tp
from .tablefile import ParseError, parse_tables
from .tables import ReferenceTables, default_tables
from .utils import print_cpu_list, print_separator, print_supported_extensions

logger = logging.getLogger('armtarget')

def _cmd_arch(args, tables: ReferenceTables) -> int:
    info = tp.parse_arch(args.name, tables)
    if info is None:
        print(f'Unknown architecture: {args.name}', file=sys.stderr)
        return 1
    major, minor = info.version
    print(f'{info.name} (sub-arch {info.sub_arch},'
          f' version {major}.{minor}, profile {info.profile})')
    return 0

def _cmd_cpu(args, tables: ReferenceTables) -> int:
    arch = tp.get_arch_for_cpu(args.name, tables)
    if arch is None:
        print(f'Unknown CPU: {args.name}', file=sys.stderr)
        return 1

    cpu = tp.parse_cpu(args.name, tables)
    if cpu is None:
        # 'generic' is accepted without being a CPU table entry
        features = tp.get_extension_features(arch.default_extensions, tables)
        name = args.name
    else:
        features = tp.get_extension_features(cpu.get_implied_extensions(),
                                             tables)
        name = cpu.name

    print(f'{name}: {arch}')
    print_separator(stream=sys.stdout)
    print(' '.join(features))
    return 0

def _cmd_ext(args, tables: ReferenceTables) -> int:
    ret = 0
    for token in args.tokens:
        feature = tp.get_arch_ext_feature(token, tables)
        if not feature:
            print(f'No feature for extension: {token}', file=sys.stderr)
            ret = 1
            continue
        print(f'{token}: {feature}')
    return ret

def _cmd_mask(args, tables: ReferenceTables) -> int:
    print(hex(tp.get_cpu_supports_mask(args.tokens, tables)))
    return 0

def _cmd_list_cpus(args, tables: ReferenceTables) -> int:
    print_cpu_list(tp.fill_valid_cpu_arch_list(tables), stream=sys.stdout)
    return 0

def _cmd_list_extensions(args, tables: ReferenceTables) -> int:
    print_supported_extensions(tables=tables, stream=sys.stdout)
    return 0

def make_argparser():
    prog = argparse.ArgumentParser(prog='armtarget')
    prog.description = 'Resolve AArch64 architecture, CPU and extension' \
                       ' names as a compiler driver would.'
    prog.add_argument('--tables',
                      help='A JSON file with reference tables to use instead'
                           ' of the built-in ones.')
    prog.add_argument('-v', '--verbose',
                      default=False,
                      action='store_true',
                      help='Print debug messages.')

    cmds = prog.add_subparsers(dest='command', required=True)

    cmd = cmds.add_parser('arch', help='Resolve an architecture name.')
    cmd.add_argument('name', help='e.g. armv8.2-a or v9a')
    cmd.set_defaults(func=_cmd_arch)

    cmd = cmds.add_parser('cpu', help='Resolve a CPU name or alias.')
    cmd.add_argument('name', help='e.g. cortex-a76 or generic')
    cmd.set_defaults(func=_cmd_cpu)

    cmd = cmds.add_parser('ext',
                          help='Print the feature strings of extensions.')
    cmd.add_argument('tokens', nargs='+',
                     help='Extension names, optionally prefixed with "no".')
    cmd.set_defaults(func=_cmd_ext)

    cmd = cmds.add_parser('mask',
                          help='Print the supports mask of extensions.')
    cmd.add_argument('tokens', nargs='*', help='Extension names.')
    cmd.set_defaults(func=_cmd_mask)

    cmd = cmds.add_parser('list-cpus',
                          help='List all valid CPU names and aliases.')
    cmd.set_defaults(func=_cmd_list_cpus)

    cmd = cmds.add_parser('list-extensions',
                          help='List all extensions usable with -march.')
    cmd.set_defaults(func=_cmd_list_extensions)

    return prog

def main(argv: list[str] | None = None) -> int:
    args = make_argparser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    tables = default_tables
    if args.tables is not None:
        try:
            with open(args.tables, 'r') as file:
                tables = parse_tables(file)
        except (OSError, ValueError, ParseError) as err:
            print(f'Unable to read reference tables from {args.tables}: {err}',
                  file=sys.stderr)
            return 2
        logger.debug(f'Using reference tables from {args.tables}.')

    return args.func(args, tables)

if __name__ == "__main__":
    sys.exit(main())
