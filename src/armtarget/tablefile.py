"""Parsing of JSON files containing reference tables."""

import json
import logging
from typing import TextIO

from .tables import ArchInfo, CpuInfo, CpuAlias, ExtensionBitset, \
                    ExtensionInfo, ExtensionID, CPUFeature, ReferenceTables

logger = logging.getLogger('armtarget-tables')

class ParseError(Exception):
    """A parse error."""

def _get_or_throw(obj: dict, key: str):
    """Get a value from a dict or throw a ParseError if not present."""
    val = obj.get(key)
    if val is not None:
        return val
    raise ParseError(f'Expected value at key {key}, but found none.')

def _get_bit_position(obj: dict, key: str, width: int) -> int:
    """Get an integer in [0, width) from a dict or throw a ParseError."""
    val = _get_or_throw(obj, key)
    # bool is a subclass of int
    if not isinstance(val, int) or isinstance(val, bool):
        raise ParseError(f'Expected an integer at key {key} of extension'
                         f' {obj.get("name")}, but found {val!r}.')
    if not 0 <= val < width:
        raise ParseError(f'Value {val} at key {key} of extension'
                         f' {obj.get("name")} is out of range [0, {width}).')
    return val

def _parse_extension(obj: dict) -> ExtensionInfo:
    ext_id = _get_bit_position(obj, 'id', ExtensionBitset.width)
    cpu_feature = _get_bit_position(obj, 'cpu_feature', 64)
    return ExtensionInfo(_get_or_throw(obj, 'name'),
                         ExtensionID(ext_id),
                         CPUFeature(cpu_feature),
                         obj.get('feature', ''),
                         obj.get('neg_feature', ''))

def _lookup_ids(names: list[str], extensions: dict[str, ExtensionInfo]) \
        -> list[ExtensionID]:
    ids = []
    for name in names:
        if name not in extensions:
            raise ParseError(f'Reference to unknown extension {name}.')
        ids.append(extensions[name].id)
    return ids

def parse_tables(json_stream: TextIO) -> ReferenceTables:
    """Parse reference tables from our JSON format.

    :raise ParseError: If a required key is missing, or if an entry refers
                       to an architecture or extension that is not defined.
    """
    json_data = json.load(json_stream)

    extensions = [_parse_extension(e)
                  for e in _get_or_throw(json_data, 'extensions')]
    ext_by_name = {e.name: e for e in extensions}

    archs = []
    for arch in _get_or_throw(json_data, 'architectures'):
        archs.append(ArchInfo(_get_or_throw(arch, 'name'),
                              _get_or_throw(arch, 'sub_arch'),
                              arch.get('profile', 'A'),
                              _lookup_ids(arch.get('extensions', []),
                                          ext_by_name)))
    arch_by_name = {a.name: a for a in archs}

    cpus = []
    for cpu in _get_or_throw(json_data, 'cpus'):
        archname = _get_or_throw(cpu, 'arch')
        if archname not in arch_by_name:
            raise ParseError(f'CPU {cpu.get("name")} refers to unknown'
                             f' architecture {archname}.')
        cpus.append(CpuInfo(_get_or_throw(cpu, 'name'),
                            arch_by_name[archname],
                            _lookup_ids(cpu.get('extensions', []),
                                        ext_by_name)))

    aliases = [CpuAlias(_get_or_throw(a, 'alias'), _get_or_throw(a, 'name'))
               for a in _get_or_throw(json_data, 'aliases')]

    baseline = _get_or_throw(json_data, 'baseline')
    if baseline not in arch_by_name:
        raise ParseError(f'Baseline architecture {baseline} is not defined.')

    tables = ReferenceTables(archs, cpus, extensions, aliases,
                             arch_by_name[baseline])
    logger.debug(f'Loaded {tables}')
    return tables

def _ext_names(ids, tables: ReferenceTables) -> list[str]:
    ids = set(ids)
    return [e.name for e in tables.extensions if e.id in ids]

def serialize_tables(tables: ReferenceTables, out_stream: TextIO):
    """Serialize reference tables to our JSON format."""
    res = {
        'baseline': tables.baseline.name,
        'architectures': [],
        'extensions': [],
        'cpus': [],
        'aliases': [],
    }
    for ext in tables.extensions:
        res['extensions'].append({
            'name': ext.name,
            'id': int(ext.id),
            'cpu_feature': int(ext.cpu_feature),
            'feature': ext.feature,
            'neg_feature': ext.neg_feature,
        })
    for arch in tables.archs:
        res['architectures'].append({
            'name': arch.name,
            'sub_arch': arch.sub_arch,
            'profile': arch.profile,
            'extensions': _ext_names(arch.default_extensions, tables),
        })
    for cpu in tables.cpus:
        res['cpus'].append({
            'name': cpu.name,
            'arch': cpu.arch.name,
            'extensions': _ext_names(cpu.default_extensions, tables),
        })
    for alias in tables.aliases:
        res['aliases'].append({'alias': alias.alias, 'name': alias.name})

    json.dump(res, out_stream, indent=2)
