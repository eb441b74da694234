"""Descriptor types that make up the AArch64 reference tables."""

from __future__ import annotations
import re
from typing import Iterable, Iterator, Literal, NamedTuple

class ExtensionID(int):
    """Bit position of an extension in an `ExtensionBitset`."""
    def __repr__(self) -> str:
        return f'ExtensionID({int(self)})'

class CPUFeature(int):
    """Bit position of an extension in the 64-bit supports mask."""
    def __repr__(self) -> str:
        return f'CPUFeature({int(self)})'

class ExtensionBitset:
    width = 128

    def __init__(self, ids: Iterable[ExtensionID] = ()):
        """A fixed-width set of enabled extensions, indexed by `ExtensionID`.

        Only `ExtensionID` positions are accepted. Passing a `CPUFeature` (or
        a plain integer) is a programming error and raises `TypeError`, so
        the two kinds of bit positions cannot be confused.

        :param ids: Extension IDs to set initially.
        """
        self._bits = 0
        for ext_id in ids:
            self.set(ext_id)

    def _bit(self, ext_id: ExtensionID) -> int:
        if not isinstance(ext_id, ExtensionID):
            raise TypeError(f'Extension bitsets are indexed by ExtensionID,'
                            f' not by {type(ext_id).__name__}.')
        if not 0 <= ext_id < self.width:
            raise IndexError(f'Extension ID {int(ext_id)} is out of range'
                             f' [0, {self.width}).')
        return 1 << ext_id

    def set(self, ext_id: ExtensionID):
        self._bits |= self._bit(ext_id)

    def reset(self, ext_id: ExtensionID):
        self._bits &= ~self._bit(ext_id)

    def test(self, ext_id: ExtensionID) -> bool:
        return (self._bits & self._bit(ext_id)) != 0

    def to_int(self) -> int:
        return self._bits

    def __iter__(self) -> Iterator[ExtensionID]:
        for i in range(self.width):
            if self._bits & (1 << i):
                yield ExtensionID(i)

    def __len__(self) -> int:
        return bin(self._bits).count('1')

    def __bool__(self) -> bool:
        return self._bits != 0

    def __or__(self, other: ExtensionBitset) -> ExtensionBitset:
        res = ExtensionBitset()
        res._bits = self._bits | other._bits
        return res

    def __and__(self, other: ExtensionBitset) -> ExtensionBitset:
        res = ExtensionBitset()
        res._bits = self._bits & other._bits
        return res

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtensionBitset):
            return False
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f'ExtensionBitset({[int(i) for i in self]})'

class ExtensionInfo:
    def __init__(self,
                 name: str,
                 ext_id: ExtensionID,
                 cpu_feature: CPUFeature,
                 feature: str,
                 neg_feature: str):
        """An optional instruction-set extension.

        :param name:        The name used on the command line, e.g. 'crc'.
        :param ext_id:      Position of the extension in extension bitsets.
        :param cpu_feature: Position of the extension in the supports mask.
                            Must be smaller than 64.
        :param feature:     Feature string that enables the extension. Empty
                            if the extension cannot be enabled on its own.
        :param neg_feature: Feature string that disables the extension.
        """
        assert(isinstance(ext_id, ExtensionID))
        assert(isinstance(cpu_feature, CPUFeature))
        assert(0 <= cpu_feature < 64)
        self.name = name
        self.id = ext_id
        self.cpu_feature = cpu_feature
        self.feature = feature
        self.neg_feature = neg_feature

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtensionInfo):
            return False
        return self.name == other.name and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.name, int(self.id)))

    def __repr__(self) -> str:
        return self.name

class ArchInfo:
    Profile = Literal['A', 'R']

    def __init__(self,
                 name: str,
                 sub_arch: str,
                 profile: Profile = 'A',
                 default_extensions: Iterable[ExtensionID] = ()):
        """An architecture revision, e.g. ARMv8.2-A.

        :param name:     Canonical name, e.g. 'armv8.2-a'.
        :param sub_arch: The sub-architecture tag, e.g. 'v8.2a'.
        :param profile:  The architecture profile.
        :param default_extensions: Extensions that every implementation of
                                   the architecture provides.
        """
        self.name = name
        self.sub_arch = sub_arch
        self.profile: Literal['A', 'R'] = profile
        self.default_extensions = ExtensionBitset(default_extensions)

        match = re.search(r'v(\d+)(?:\.(\d+))?', name)
        if match is None:
            raise ValueError(f'Architecture name {name} contains no version.')
        self.version = (int(match.group(1)), int(match.group(2) or 0))
        """The architecture version as a `(major, minor)` tuple."""

    def implements(self, other: ArchInfo) -> bool:
        """Check whether this architecture is a superset of `other`.

        Only architectures of the same profile are comparable.
        """
        if self.profile != other.profile:
            return False
        if self.version[0] == other.version[0]:
            return self.version[1] >= other.version[1]
        # v9.x implements v8.(x+5)
        if self.version[0] == 9 and other.version[0] == 8:
            return self.version[1] + 5 >= other.version[1]
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArchInfo):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return self.name

class CpuInfo:
    def __init__(self,
                 name: str,
                 arch: ArchInfo,
                 default_extensions: Iterable[ExtensionID] = ()):
        """A CPU and the extensions it enables by default.

        :param name: Canonical CPU name, e.g. 'cortex-a76'.
        :param arch: The architecture the CPU implements. This is a reference
                     to an entry in the architecture table.
        :param default_extensions: Extensions the CPU provides on top of its
                                   architecture's defaults.
        """
        self.name = name
        self.arch = arch
        self.default_extensions = ExtensionBitset(default_extensions)

    def get_implied_extensions(self) -> ExtensionBitset:
        """All extensions enabled for the CPU, including the architecture's."""
        return self.default_extensions | self.arch.default_extensions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CpuInfo):
            return False
        return self.name == other.name and self.arch == other.arch

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f'{self.name} ({self.arch})'

class CpuAlias(NamedTuple):
    alias: str
    name: str

class ReferenceTables:
    def __init__(self,
                 archs: Iterable[ArchInfo],
                 cpus: Iterable[CpuInfo],
                 extensions: Iterable[ExtensionInfo],
                 aliases: Iterable[CpuAlias],
                 baseline: ArchInfo):
        """The read-only data that every lookup operates on.

        Table order is significant: lookups return the first match.

        :param baseline: The architecture that the 'generic' CPU resolves to.
        """
        self._archs = tuple(archs)
        self._cpus = tuple(cpus)
        self._extensions = tuple(extensions)
        self._aliases = tuple(CpuAlias(*a) for a in aliases)
        self._baseline = baseline

    @property
    def archs(self) -> tuple[ArchInfo, ...]:
        return self._archs

    @property
    def cpus(self) -> tuple[CpuInfo, ...]:
        return self._cpus

    @property
    def extensions(self) -> tuple[ExtensionInfo, ...]:
        return self._extensions

    @property
    def aliases(self) -> tuple[CpuAlias, ...]:
        return self._aliases

    @property
    def baseline(self) -> ArchInfo:
        return self._baseline

    def __repr__(self) -> str:
        return f'ReferenceTables with {len(self._archs)} architectures,' \
               f' {len(self._cpus)} CPUs, {len(self._extensions)} extensions' \
               f' and {len(self._aliases)} aliases.'
