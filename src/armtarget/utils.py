from __future__ import annotations

import shutil
import sys

from .tables import ReferenceTables, default_tables

def print_separator(separator: str = '-', stream=sys.stdout, count: int = 80):
    maxtermsize = count
    termsize = shutil.get_terminal_size((80, 20)).columns
    print(separator * min(termsize, maxtermsize), file=stream)

def print_supported_extensions(descriptions: dict[str, str] | None = None,
                               tables: ReferenceTables = default_tables,
                               stream=sys.stdout):
    """Print a table of all extensions that can be used with -march.

    :param descriptions: Maps extension names to a human-readable description.
                         If given, a description column is printed.
    :param tables:       The reference tables to list the extensions of.
    :param stream:       The stream to which to print.
    """
    descriptions = descriptions or {}

    header = 'Description' if descriptions else ''
    print('All available -march extensions for AArch64\n', file=stream)
    print(f'    {"Name":<20}{header}'.rstrip(), file=stream)
    for ext in tables.extensions:
        # Extensions without a feature cannot be used with -march
        if not ext.feature:
            continue
        desc = descriptions.get(ext.name, '')
        if desc:
            print(f'    {ext.name:<20}{desc}', file=stream)
        else:
            print(f'    {ext.name}', file=stream)

def print_cpu_list(values: list[str], stream=sys.stdout, count: int = 80):
    """Print names as a comma-separated list, wrapped at `count` columns."""
    line = ''
    for i, name in enumerate(values):
        item = name + (', ' if i + 1 < len(values) else '')
        if line and len(line) + len(item.rstrip()) > count:
            print(line.rstrip(), file=stream)
            line = ''
        line += item
    if line:
        print(line.rstrip(), file=stream)
