"""Resolution of AArch64 target descriptions: architecture versions, CPU
names and aliases, and instruction-set extensions."""

__version__ = '0.1.0'
