from .descriptors import ArchInfo, CpuInfo, CpuAlias, ExtensionInfo, \
                         ExtensionID, CPUFeature, ExtensionBitset, \
                         ReferenceTables
from . import aarch64

default_tables = ReferenceTables(aarch64.archs,
                                 aarch64.cpus,
                                 aarch64.extensions,
                                 aarch64.aliases,
                                 aarch64.baseline)
"""The built-in AArch64 reference tables.

Every lookup in `armtarget.targetparser` uses these unless it is passed
another `ReferenceTables` bundle.
"""
