"""Resolution of AArch64 architecture, CPU and extension names.

Every lookup takes the reference tables as its last argument, defaulting to
the built-in AArch64 tables. A string that is not recognized yields `None`
(or an empty feature string); no lookup raises for bad input.
"""

from typing import Callable, Iterable
import logging

from .archname import get_canonical_arch_name, get_arch_synonym
from .tables import ArchInfo, CpuInfo, ExtensionInfo, ExtensionBitset, \
                    ExtensionID, ReferenceTables, default_tables

logger = logging.getLogger('armtarget-parser')

def check_arch_version(arch: str) -> int:
    """Extract the major version from a canonical name such as 'v8.2-a'.

    Only the single digit following the leading 'v' is considered.

    :return: The major version, or 0 if `arch` does not start with 'vN'.
    """
    if len(arch) >= 2 and arch[0] == 'v' and arch[1] in '0123456789':
        return int(arch[1])
    return 0

def parse_arch(arch: str,
               tables: ReferenceTables = default_tables,
               canonicalize: Callable[[str], str] = get_canonical_arch_name,
               synonym: Callable[[str], str] = get_arch_synonym) \
        -> ArchInfo | None:
    """Find the architecture described by a user-supplied string.

    Allows partial matches: 'v8a' matches 'armv8-a' because the synonym of
    'v8a' is a suffix of it. If several architectures end with the synonym,
    the first one in table order is returned.

    :param canonicalize: Strips ISA prefixes and endianness markers.
    :param synonym:      Expands a canonical name to the form used in the
                         architecture table.
    """
    canonical = canonicalize(arch)
    if check_arch_version(canonical) < 8:
        logger.debug(f'Rejecting architecture {arch!r}: no version >= 8.')
        return None

    syn = synonym(canonical)
    for info in tables.archs:
        if info.name.endswith(syn):
            return info
    return None

def find_by_sub_arch(sub_arch: str,
                     tables: ReferenceTables = default_tables) \
        -> ArchInfo | None:
    """Find the architecture with the exact sub-architecture tag `sub_arch`."""
    for info in tables.archs:
        if info.sub_arch == sub_arch:
            return info
    return None

def resolve_cpu_alias(name: str,
                      tables: ReferenceTables = default_tables) -> str:
    """Get the canonical CPU name for an alias.

    :return: The name the first matching alias refers to, or `name` itself
             if it is not an alias.
    """
    for alias in tables.aliases:
        if alias.alias == name:
            return alias.name
    return name

def parse_cpu(name: str,
              tables: ReferenceTables = default_tables) -> CpuInfo | None:
    """Find a CPU by its name or one of its aliases."""
    # Resolve aliases first
    name = resolve_cpu_alias(name, tables)

    for cpu in tables.cpus:
        if cpu.name == name:
            return cpu
    return None

def get_arch_for_cpu(cpu: str,
                     tables: ReferenceTables = default_tables) \
        -> ArchInfo | None:
    """Get the architecture a CPU implements.

    'generic' always maps to the baseline architecture, whether or not the
    CPU table contains it.
    """
    if cpu == 'generic':
        return tables.baseline

    info = parse_cpu(cpu, tables)
    if info is None:
        return None
    return info.arch

def parse_arch_extension(ext: str,
                         tables: ReferenceTables = default_tables) \
        -> ExtensionInfo | None:
    for info in tables.extensions:
        if info.name == ext:
            return info
    return None

def get_arch_ext_name(ext_id: ExtensionID,
                      tables: ReferenceTables = default_tables) -> str | None:
    for info in tables.extensions:
        if info.id == ext_id:
            return info.name
    return None

def get_arch_ext_feature(ext: str,
                         tables: ReferenceTables = default_tables) -> str:
    """Get the feature string that enables or disables an extension.

    A leading 'no' disables the extension, e.g. 'nocrc' yields '-crc'.

    :return: The feature string. Is empty if the extension is unknown, or if
             it is known but cannot be toggled on its own.
    """
    negated = ext.startswith('no')
    base = ext[2:] if negated else ext

    info = parse_arch_extension(base, tables)
    if info is None:
        return ''
    return info.neg_feature if negated else info.feature

def get_cpu_supports_mask(features: Iterable[str],
                          tables: ReferenceTables = default_tables) -> int:
    """Fold extension names into a 64-bit mask indexed by `CPUFeature`.

    Names that do not denote an extension are skipped.
    """
    mask = 0
    for name in features:
        info = parse_arch_extension(name, tables)
        if info is None:
            logger.debug(f'Ignoring unknown feature {name!r}.')
            continue
        mask |= 1 << info.cpu_feature
    return mask

def get_extension_features(extensions: ExtensionBitset,
                           tables: ReferenceTables = default_tables) \
        -> list[str]:
    """Get the feature strings of all extensions set in `extensions`.

    Features are returned in extension table order. Extensions without a
    feature string are left out.
    """
    return [info.feature for info in tables.extensions
            if extensions.test(info.id) and info.feature]

def get_implied_features(cpu: str,
                         tables: ReferenceTables = default_tables) \
        -> list[str] | None:
    """Get the feature strings of every extension a CPU enables by default.

    :return: The features of the CPU and of its architecture, or None if
             `cpu` is not a known CPU name or alias.
    """
    info = parse_cpu(cpu, tables)
    if info is None:
        return None
    return get_extension_features(info.get_implied_extensions(), tables)

def fill_valid_cpu_arch_list(tables: ReferenceTables = default_tables) \
        -> list[str]:
    """List all accepted CPU names: canonical names first, then aliases."""
    values = [cpu.name for cpu in tables.cpus]
    values += [alias.alias for alias in tables.aliases]
    return values
