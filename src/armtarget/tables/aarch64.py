"""Reference data for 64-bit ARM targets."""

from .descriptors import ArchInfo as _Arch, \
                         CpuAlias as _Alias, \
                         CpuInfo as _Cpu, \
                         CPUFeature, \
                         ExtensionID, \
                         ExtensionInfo as _Ext

# Extension IDs. These are bit positions in extension bitsets and must not be
# renumbered.
AEK_NONE        = ExtensionID(0)
AEK_CRC         = ExtensionID(1)
AEK_CRYPTO      = ExtensionID(2)
AEK_FP          = ExtensionID(3)
AEK_SIMD        = ExtensionID(4)
AEK_FP16        = ExtensionID(5)
AEK_PROFILE     = ExtensionID(6)
AEK_RAS         = ExtensionID(7)
AEK_LSE         = ExtensionID(8)
AEK_SVE         = ExtensionID(9)
AEK_DOTPROD     = ExtensionID(10)
AEK_RCPC        = ExtensionID(11)
AEK_RDM         = ExtensionID(12)
AEK_SM4         = ExtensionID(13)
AEK_SHA3        = ExtensionID(14)
AEK_SHA2        = ExtensionID(15)
AEK_AES         = ExtensionID(16)
AEK_FP16FML     = ExtensionID(17)
AEK_RAND        = ExtensionID(18)
AEK_MTE         = ExtensionID(19)
AEK_SSBS        = ExtensionID(20)
AEK_SB          = ExtensionID(21)
AEK_PREDRES     = ExtensionID(22)
AEK_SVE2        = ExtensionID(23)
AEK_SVE2AES     = ExtensionID(24)
AEK_SVE2SM4     = ExtensionID(25)
AEK_SVE2SHA3    = ExtensionID(26)
AEK_SVE2BITPERM = ExtensionID(27)
AEK_RCPC3       = ExtensionID(28)
AEK_BF16        = ExtensionID(29)
AEK_I8MM        = ExtensionID(30)
AEK_F32MM       = ExtensionID(31)
AEK_F64MM       = ExtensionID(32)
AEK_TME         = ExtensionID(33)
AEK_LS64        = ExtensionID(34)
AEK_BRBE        = ExtensionID(35)
AEK_PAUTH       = ExtensionID(36)
AEK_FLAGM       = ExtensionID(37)
AEK_SME         = ExtensionID(38)
AEK_SMEF64F64   = ExtensionID(39)
AEK_SMEI16I64   = ExtensionID(40)
AEK_HBC         = ExtensionID(41)
AEK_MOPS        = ExtensionID(42)
AEK_PERFMON     = ExtensionID(43)
AEK_SME2        = ExtensionID(44)
AEK_CSSC        = ExtensionID(45)
AEK_JSCVT       = ExtensionID(46)
AEK_FCMA        = ExtensionID(47)
AEK_DIT         = ExtensionID(48)
AEK_BTI         = ExtensionID(49)
AEK_DGH         = ExtensionID(50)
AEK_RPRES       = ExtensionID(51)

# Supports-mask bit positions, as detected at runtime.
FEAT_RNG          = CPUFeature(0)
FEAT_FLAGM        = CPUFeature(1)
FEAT_FLAGM2       = CPUFeature(2)
FEAT_FP16FML      = CPUFeature(3)
FEAT_DOTPROD      = CPUFeature(4)
FEAT_SM4          = CPUFeature(5)
FEAT_RDM          = CPUFeature(6)
FEAT_LSE          = CPUFeature(7)
FEAT_FP           = CPUFeature(8)
FEAT_SIMD         = CPUFeature(9)
FEAT_CRC          = CPUFeature(10)
FEAT_SHA1         = CPUFeature(11)
FEAT_SHA2         = CPUFeature(12)
FEAT_SHA3         = CPUFeature(13)
FEAT_AES          = CPUFeature(14)
FEAT_PMULL        = CPUFeature(15)
FEAT_FP16         = CPUFeature(16)
FEAT_DIT          = CPUFeature(17)
FEAT_DPB          = CPUFeature(18)
FEAT_DPB2         = CPUFeature(19)
FEAT_JSCVT        = CPUFeature(20)
FEAT_FCMA         = CPUFeature(21)
FEAT_RCPC         = CPUFeature(22)
FEAT_RCPC2        = CPUFeature(23)
FEAT_FRINTTS      = CPUFeature(24)
FEAT_DGH          = CPUFeature(25)
FEAT_I8MM         = CPUFeature(26)
FEAT_BF16         = CPUFeature(27)
FEAT_EBF16        = CPUFeature(28)
FEAT_RPRES        = CPUFeature(29)
FEAT_SVE          = CPUFeature(30)
FEAT_SVE_BF16     = CPUFeature(31)
FEAT_SVE_EBF16    = CPUFeature(32)
FEAT_SVE_I8MM     = CPUFeature(33)
FEAT_SVE_F32MM    = CPUFeature(34)
FEAT_SVE_F64MM    = CPUFeature(35)
FEAT_SVE2         = CPUFeature(36)
FEAT_SVE_AES      = CPUFeature(37)
FEAT_SVE_PMULL128 = CPUFeature(38)
FEAT_SVE_BITPERM  = CPUFeature(39)
FEAT_SVE_SHA3     = CPUFeature(40)
FEAT_SVE_SM4      = CPUFeature(41)
FEAT_SME          = CPUFeature(42)
FEAT_MEMTAG       = CPUFeature(43)
FEAT_MEMTAG2      = CPUFeature(44)
FEAT_MEMTAG3      = CPUFeature(45)
FEAT_SB           = CPUFeature(46)
FEAT_PREDRES      = CPUFeature(47)
FEAT_SSBS         = CPUFeature(48)
FEAT_SSBS2        = CPUFeature(49)
FEAT_BTI          = CPUFeature(50)
FEAT_LS64         = CPUFeature(51)
FEAT_LS64_V       = CPUFeature(52)
FEAT_LS64_ACCDATA = CPUFeature(53)
FEAT_WFXT         = CPUFeature(54)
FEAT_SME_F64      = CPUFeature(55)
FEAT_SME_I64      = CPUFeature(56)
FEAT_SME2         = CPUFeature(57)
FEAT_RCPC3        = CPUFeature(58)
# Extensions that cannot be detected at runtime share this position.
FEAT_INIT         = CPUFeature(63)

extensions = [
    _Ext('aes',          AEK_AES,         FEAT_AES,         '+aes',          '-aes'),
    _Ext('bf16',         AEK_BF16,        FEAT_BF16,        '+bf16',         '-bf16'),
    _Ext('brbe',         AEK_BRBE,        FEAT_INIT,        '+brbe',         '-brbe'),
    _Ext('bti',          AEK_BTI,         FEAT_BTI,         '',              ''),
    _Ext('crc',          AEK_CRC,         FEAT_CRC,         '+crc',          '-crc'),
    _Ext('crypto',       AEK_CRYPTO,      FEAT_INIT,        '+crypto',       '-crypto'),
    _Ext('cssc',         AEK_CSSC,        FEAT_INIT,        '+cssc',         '-cssc'),
    _Ext('dgh',          AEK_DGH,         FEAT_DGH,         '',              ''),
    _Ext('dit',          AEK_DIT,         FEAT_DIT,         '',              ''),
    _Ext('dotprod',      AEK_DOTPROD,     FEAT_DOTPROD,     '+dotprod',      '-dotprod'),
    _Ext('f32mm',        AEK_F32MM,       FEAT_SVE_F32MM,   '+f32mm',        '-f32mm'),
    _Ext('f64mm',        AEK_F64MM,       FEAT_SVE_F64MM,   '+f64mm',        '-f64mm'),
    _Ext('fcma',         AEK_FCMA,        FEAT_FCMA,        '',              ''),
    _Ext('flagm',        AEK_FLAGM,       FEAT_FLAGM,       '+flagm',        '-flagm'),
    _Ext('fp',           AEK_FP,          FEAT_FP,          '+fp-armv8',     '-fp-armv8'),
    _Ext('fp16',         AEK_FP16,        FEAT_FP16,        '+fullfp16',     '-fullfp16'),
    _Ext('fp16fml',      AEK_FP16FML,     FEAT_FP16FML,     '+fp16fml',      '-fp16fml'),
    _Ext('hbc',          AEK_HBC,         FEAT_INIT,        '+hbc',          '-hbc'),
    _Ext('i8mm',         AEK_I8MM,        FEAT_I8MM,        '+i8mm',         '-i8mm'),
    _Ext('jscvt',        AEK_JSCVT,       FEAT_JSCVT,       '',              ''),
    _Ext('ls64',         AEK_LS64,        FEAT_LS64,        '+ls64',         '-ls64'),
    _Ext('lse',          AEK_LSE,         FEAT_LSE,         '+lse',          '-lse'),
    _Ext('memtag',       AEK_MTE,         FEAT_MEMTAG,      '+mte',          '-mte'),
    _Ext('mops',         AEK_MOPS,        FEAT_INIT,        '+mops',         '-mops'),
    _Ext('pauth',        AEK_PAUTH,       FEAT_INIT,        '+pauth',        '-pauth'),
    _Ext('pmuv3',        AEK_PERFMON,     FEAT_INIT,        '+perfmon',      '-perfmon'),
    _Ext('predres',      AEK_PREDRES,     FEAT_PREDRES,     '+predres',      '-predres'),
    _Ext('profile',      AEK_PROFILE,     FEAT_INIT,        '+spe',          '-spe'),
    _Ext('ras',          AEK_RAS,         FEAT_INIT,        '+ras',          '-ras'),
    _Ext('rcpc',         AEK_RCPC,        FEAT_RCPC,        '+rcpc',         '-rcpc'),
    _Ext('rcpc3',        AEK_RCPC3,       FEAT_RCPC3,       '+rcpc3',        '-rcpc3'),
    _Ext('rdm',          AEK_RDM,         FEAT_RDM,         '+rdm',          '-rdm'),
    _Ext('rng',          AEK_RAND,        FEAT_RNG,         '+rand',         '-rand'),
    _Ext('rpres',        AEK_RPRES,       FEAT_RPRES,       '',              ''),
    _Ext('sb',           AEK_SB,          FEAT_SB,          '+sb',           '-sb'),
    _Ext('sha2',         AEK_SHA2,        FEAT_SHA2,        '+sha2',         '-sha2'),
    _Ext('sha3',         AEK_SHA3,        FEAT_SHA3,        '+sha3',         '-sha3'),
    _Ext('simd',         AEK_SIMD,        FEAT_SIMD,        '+neon',         '-neon'),
    _Ext('sm4',          AEK_SM4,         FEAT_SM4,         '+sm4',          '-sm4'),
    _Ext('sme',          AEK_SME,         FEAT_SME,         '+sme',          '-sme'),
    _Ext('sme-f64f64',   AEK_SMEF64F64,   FEAT_SME_F64,     '+sme-f64f64',   '-sme-f64f64'),
    _Ext('sme-i16i64',   AEK_SMEI16I64,   FEAT_SME_I64,     '+sme-i16i64',   '-sme-i16i64'),
    _Ext('sme2',         AEK_SME2,        FEAT_SME2,        '+sme2',         '-sme2'),
    _Ext('ssbs',         AEK_SSBS,        FEAT_SSBS,        '+ssbs',         '-ssbs'),
    _Ext('sve',          AEK_SVE,         FEAT_SVE,         '+sve',          '-sve'),
    _Ext('sve2',         AEK_SVE2,        FEAT_SVE2,        '+sve2',         '-sve2'),
    _Ext('sve2-aes',     AEK_SVE2AES,     FEAT_SVE_AES,     '+sve2-aes',     '-sve2-aes'),
    _Ext('sve2-bitperm', AEK_SVE2BITPERM, FEAT_SVE_BITPERM, '+sve2-bitperm', '-sve2-bitperm'),
    _Ext('sve2-sha3',    AEK_SVE2SHA3,    FEAT_SVE_SHA3,    '+sve2-sha3',    '-sve2-sha3'),
    _Ext('sve2-sm4',     AEK_SVE2SM4,     FEAT_SVE_SM4,     '+sve2-sm4',     '-sve2-sm4'),
    _Ext('tme',          AEK_TME,         FEAT_INIT,        '+tme',          '-tme'),
    # Has no feature string and cannot be used with -march.
    _Ext('none',         AEK_NONE,        FEAT_INIT,        '',              ''),
]

# Architecture revisions. Each one builds on the defaults of its predecessor.
_v8a_exts = [AEK_FP, AEK_SIMD]
_v8_1a_exts = _v8a_exts + [AEK_CRC, AEK_LSE, AEK_RDM]
_v8_2a_exts = _v8_1a_exts + [AEK_RAS]
_v8_3a_exts = _v8_2a_exts + [AEK_RCPC, AEK_JSCVT, AEK_FCMA, AEK_PAUTH]
_v8_4a_exts = _v8_3a_exts + [AEK_DOTPROD, AEK_FLAGM, AEK_DIT]
_v8_5a_exts = _v8_4a_exts + [AEK_SSBS, AEK_SB, AEK_PREDRES, AEK_BTI]
_v8_6a_exts = _v8_5a_exts + [AEK_BF16, AEK_I8MM]
_v8_7a_exts = _v8_6a_exts
_v8_8a_exts = _v8_7a_exts + [AEK_MOPS, AEK_HBC]
_v8_9a_exts = _v8_8a_exts + [AEK_CSSC]
_v9a_exts = _v8_5a_exts + [AEK_FP16, AEK_SVE, AEK_SVE2]
_v9_1a_exts = _v9a_exts + [AEK_BF16, AEK_I8MM]
_v9_2a_exts = _v9_1a_exts
_v9_3a_exts = _v9_2a_exts + [AEK_MOPS, AEK_HBC]
_v9_4a_exts = _v9_3a_exts + [AEK_CSSC]
_v8r_exts = [AEK_CRC, AEK_RDM, AEK_SSBS, AEK_DOTPROD, AEK_FP, AEK_SIMD,
             AEK_FP16, AEK_FP16FML, AEK_RAS, AEK_RCPC, AEK_SB]

ARMV8A   = _Arch('armv8-a',   'v8a',   'A', _v8a_exts)
ARMV8_1A = _Arch('armv8.1-a', 'v8.1a', 'A', _v8_1a_exts)
ARMV8_2A = _Arch('armv8.2-a', 'v8.2a', 'A', _v8_2a_exts)
ARMV8_3A = _Arch('armv8.3-a', 'v8.3a', 'A', _v8_3a_exts)
ARMV8_4A = _Arch('armv8.4-a', 'v8.4a', 'A', _v8_4a_exts)
ARMV8_5A = _Arch('armv8.5-a', 'v8.5a', 'A', _v8_5a_exts)
ARMV8_6A = _Arch('armv8.6-a', 'v8.6a', 'A', _v8_6a_exts)
ARMV8_7A = _Arch('armv8.7-a', 'v8.7a', 'A', _v8_7a_exts)
ARMV8_8A = _Arch('armv8.8-a', 'v8.8a', 'A', _v8_8a_exts)
ARMV8_9A = _Arch('armv8.9-a', 'v8.9a', 'A', _v8_9a_exts)
ARMV9A   = _Arch('armv9-a',   'v9a',   'A', _v9a_exts)
ARMV9_1A = _Arch('armv9.1-a', 'v9.1a', 'A', _v9_1a_exts)
ARMV9_2A = _Arch('armv9.2-a', 'v9.2a', 'A', _v9_2a_exts)
ARMV9_3A = _Arch('armv9.3-a', 'v9.3a', 'A', _v9_3a_exts)
ARMV9_4A = _Arch('armv9.4-a', 'v9.4a', 'A', _v9_4a_exts)
ARMV8R   = _Arch('armv8-r',   'v8r',   'R', _v8r_exts)

# Order matters: architecture lookup returns the first suffix match.
archs = [
    ARMV8A, ARMV8_1A, ARMV8_2A, ARMV8_3A, ARMV8_4A, ARMV8_5A, ARMV8_6A,
    ARMV8_7A, ARMV8_8A, ARMV8_9A,
    ARMV9A, ARMV9_1A, ARMV9_2A, ARMV9_3A, ARMV9_4A,
    ARMV8R,
]

baseline = ARMV8A
"""The architecture of the 'generic' CPU."""

cpus = [
    _Cpu('cortex-a34', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a35', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a53', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a55', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_DOTPROD,
                                  AEK_RCPC]),
    _Cpu('cortex-a510', ARMV9A, [AEK_BF16, AEK_I8MM, AEK_SVE2BITPERM,
                                 AEK_MTE, AEK_SB, AEK_FP16FML]),
    _Cpu('cortex-a57', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a72', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a73', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('cortex-a75', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_DOTPROD,
                                  AEK_RCPC]),
    _Cpu('cortex-a76', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_DOTPROD,
                                  AEK_RCPC, AEK_SSBS]),
    _Cpu('cortex-a77', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_RCPC,
                                  AEK_DOTPROD, AEK_SSBS]),
    _Cpu('cortex-a78', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_DOTPROD,
                                  AEK_RCPC, AEK_SSBS, AEK_PROFILE]),
    _Cpu('cortex-a710', ARMV9A, [AEK_MTE, AEK_PAUTH, AEK_FLAGM, AEK_SB,
                                 AEK_I8MM, AEK_BF16, AEK_SVE2BITPERM,
                                 AEK_FP16FML]),
    _Cpu('cortex-r82', ARMV8R, [AEK_LSE]),
    _Cpu('cortex-x1', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_DOTPROD,
                                 AEK_RCPC, AEK_SSBS, AEK_PROFILE]),
    _Cpu('cortex-x2', ARMV9A, [AEK_MTE, AEK_BF16, AEK_I8MM, AEK_PAUTH,
                               AEK_SSBS, AEK_SB, AEK_SVE2BITPERM,
                               AEK_FP16FML]),
    _Cpu('neoverse-e1', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_DOTPROD, AEK_FP16,
                                   AEK_RCPC, AEK_SSBS]),
    _Cpu('neoverse-n1', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_DOTPROD, AEK_FP16,
                                   AEK_PROFILE, AEK_RCPC, AEK_SSBS]),
    _Cpu('neoverse-n2', ARMV8_5A, [AEK_AES, AEK_SHA2, AEK_SHA3, AEK_SM4,
                                   AEK_BF16, AEK_DOTPROD, AEK_FP16,
                                   AEK_I8MM, AEK_MTE, AEK_SVE2BITPERM,
                                   AEK_PROFILE]),
    _Cpu('neoverse-v1', ARMV8_4A, [AEK_SVE, AEK_SHA2, AEK_AES, AEK_SHA3,
                                   AEK_SM4, AEK_FP16, AEK_BF16, AEK_PROFILE,
                                   AEK_RAND, AEK_FP16FML, AEK_I8MM]),
    _Cpu('neoverse-v2', ARMV9A, [AEK_AES, AEK_SVE, AEK_SSBS, AEK_FP16,
                                 AEK_BF16, AEK_RAND, AEK_DOTPROD,
                                 AEK_PROFILE, AEK_SVE2BITPERM, AEK_FP16FML,
                                 AEK_I8MM, AEK_MTE]),
    _Cpu('apple-a7', ARMV8A, [AEK_AES, AEK_SHA2]),
    _Cpu('apple-a10', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC, AEK_RDM]),
    _Cpu('apple-a11', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16]),
    _Cpu('apple-a12', ARMV8_3A, [AEK_AES, AEK_SHA2, AEK_FP16]),
    _Cpu('apple-a13', ARMV8_4A, [AEK_AES, AEK_SHA2, AEK_SHA3, AEK_FP16,
                                 AEK_FP16FML]),
    _Cpu('apple-a14', ARMV8_5A, [AEK_AES, AEK_SHA2, AEK_SHA3, AEK_FP16,
                                 AEK_FP16FML]),
    _Cpu('apple-m1', ARMV8_5A, [AEK_AES, AEK_SHA2, AEK_SHA3, AEK_FP16,
                                AEK_FP16FML]),
    _Cpu('a64fx', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16, AEK_SVE]),
    _Cpu('carmel', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_FP16]),
    _Cpu('exynos-m3', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('falkor', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC, AEK_RDM]),
    _Cpu('kryo', ARMV8A, [AEK_AES, AEK_SHA2, AEK_CRC]),
    _Cpu('thunderx2t99', ARMV8_1A, [AEK_AES, AEK_SHA2]),
    _Cpu('tsv110', ARMV8_2A, [AEK_AES, AEK_SHA2, AEK_DOTPROD, AEK_FP16,
                              AEK_FP16FML, AEK_PROFILE]),
    _Cpu('ampere1', ARMV8_6A, [AEK_AES, AEK_SHA2, AEK_SHA3, AEK_FP16,
                               AEK_SB, AEK_SSBS, AEK_RAND]),
]

aliases = [
    _Alias('cyclone', 'apple-a7'),
    _Alias('apple-a8', 'apple-a7'),
    _Alias('apple-a9', 'apple-a7'),
    _Alias('apple-s4', 'apple-a12'),
    _Alias('apple-s5', 'apple-a12'),
    _Alias('cobalt-100', 'neoverse-n2'),
    _Alias('grace', 'neoverse-v2'),
]
