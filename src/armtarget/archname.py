"""Normalization of user-supplied architecture names.

Both functions operate purely on strings and know nothing about the
reference tables.
"""

_arch_synonyms = {
    'v5':         'v5t',
    'v5e':        'v5te',
    'v6j':        'v6',
    'v6hl':       'v6k',
    'v6m':        'v6-m',
    'v6sm':       'v6-m',
    'v6s-m':      'v6-m',
    'v6z':        'v6kz',
    'v6zk':       'v6kz',
    'v7':         'v7-a',
    'v7a':        'v7-a',
    'v7hl':       'v7-a',
    'v7l':        'v7-a',
    'v7r':        'v7-r',
    'v7m':        'v7-m',
    'v7em':       'v7e-m',
    'v8':         'v8-a',
    'v8a':        'v8-a',
    'v8l':        'v8-a',
    'aarch64':    'v8-a',
    'arm64':      'v8-a',
    'v8r':        'v8-r',
    'v9':         'v9-a',
    'v9a':        'v9-a',
    'v8m.base':   'v8-m.base',
    'v8m.main':   'v8-m.main',
    'v8.1m.main': 'v8.1-m.main',
}
_arch_synonyms |= {f'v8.{minor}a': f'v8.{minor}-a' for minor in range(1, 10)}
_arch_synonyms |= {f'v9.{minor}a': f'v9.{minor}-a' for minor in range(1, 6)}

# Checked in order; longer prefixes must come before their own prefixes.
_arch_prefixes = ['arm64_32', 'arm64e', 'arm64', 'aarch64_32', 'arm', 'thumb']

def get_canonical_arch_name(arch: str) -> str:
    """Strip the ISA prefix and endianness marker from an architecture name.

    Examples: 'armv8.2-a' -> 'v8.2-a', 'armebv7' -> 'v7', 'aarch64_be' ->
    'aarch64_be', 'xscale' -> 'xscale'.

    :param arch: A possibly non-canonical architecture name.
    :return: The canonical name, or an empty string if `arch` starts with an
             ISA prefix but is not followed by a valid 'vN' version.
    """
    offset = None
    name = arch

    for prefix in _arch_prefixes:
        if name.startswith(prefix):
            offset = len(prefix)
            break
    else:
        if name.startswith('aarch64'):
            offset = len('aarch64')
            # AArch64 uses "_be", not "eb" suffix.
            if 'eb' in name:
                return ''
            if name[offset:offset + 3] == '_be':
                offset += 3

    # Ex. "armebv7", move past the "eb". Or, if it ends with "eb" ("armv7eb"),
    # chop it off.
    if offset is not None and name[offset:offset + 2] == 'eb':
        offset += 2
    elif name.endswith('eb'):
        name = name[:-2]

    if offset is not None:
        name = name[offset:]

    # The prefix was the entire name
    if not name:
        return arch

    # Only match non-marketing names
    if offset is not None:
        if len(name) >= 2 and (name[0] != 'v' or name[1] not in '0123456789'):
            return ''
        if 'eb' in name:
            return ''

    return name

def get_arch_synonym(arch: str) -> str:
    """Map a short architecture name to its dashed form, e.g. 'v8a' -> 'v8-a'.

    Names without a known synonym are returned unchanged.
    """
    return _arch_synonyms.get(arch, arch)
