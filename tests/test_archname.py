import unittest

from armtarget.archname import get_canonical_arch_name, get_arch_synonym

class TestCanonicalArchName(unittest.TestCase):
    def test_strip_prefix(self):
        self.assertEqual(get_canonical_arch_name('armv8.2-a'), 'v8.2-a')
        self.assertEqual(get_canonical_arch_name('armv8a'), 'v8a')
        self.assertEqual(get_canonical_arch_name('thumbv8a'), 'v8a')
        self.assertEqual(get_canonical_arch_name('arm64_32v8'), 'v8')

    def test_no_prefix(self):
        self.assertEqual(get_canonical_arch_name('v8.2a'), 'v8.2a')
        self.assertEqual(get_canonical_arch_name('xscale'), 'xscale')
        self.assertEqual(get_canonical_arch_name(''), '')

    def test_endianness(self):
        self.assertEqual(get_canonical_arch_name('armebv7'), 'v7')
        self.assertEqual(get_canonical_arch_name('armv7eb'), 'v7')
        self.assertEqual(get_canonical_arch_name('aarch64_be'), 'aarch64_be')
        self.assertEqual(get_canonical_arch_name('aarch64eb'), '')
        self.assertEqual(get_canonical_arch_name('armv8ebx'), '')

    def test_prefix_only(self):
        self.assertEqual(get_canonical_arch_name('aarch64'), 'aarch64')
        self.assertEqual(get_canonical_arch_name('arm64'), 'arm64')
        self.assertEqual(get_canonical_arch_name('arm64e'), 'arm64e')
        self.assertEqual(get_canonical_arch_name('arm'), 'arm')

    def test_invalid_after_prefix(self):
        self.assertEqual(get_canonical_arch_name('armfoo'), '')
        self.assertEqual(get_canonical_arch_name('armvx'), '')
        self.assertEqual(get_canonical_arch_name('thumbxscale'), '')

class TestArchSynonym(unittest.TestCase):
    def test_aarch64_synonyms(self):
        for name in ['v8', 'v8a', 'v8l', 'aarch64', 'arm64']:
            self.assertEqual(get_arch_synonym(name), 'v8-a', name)
        self.assertEqual(get_arch_synonym('v8.1a'), 'v8.1-a')
        self.assertEqual(get_arch_synonym('v8.9a'), 'v8.9-a')
        self.assertEqual(get_arch_synonym('v9'), 'v9-a')
        self.assertEqual(get_arch_synonym('v9a'), 'v9-a')
        self.assertEqual(get_arch_synonym('v9.5a'), 'v9.5-a')
        self.assertEqual(get_arch_synonym('v8r'), 'v8-r')

    def test_aarch32_synonyms(self):
        self.assertEqual(get_arch_synonym('v7'), 'v7-a')
        self.assertEqual(get_arch_synonym('v7em'), 'v7e-m')
        self.assertEqual(get_arch_synonym('v8m.main'), 'v8-m.main')

    def test_pass_through(self):
        self.assertEqual(get_arch_synonym('v8.2-a'), 'v8.2-a')
        self.assertEqual(get_arch_synonym('xscale'), 'xscale')
        self.assertEqual(get_arch_synonym(''), '')

if __name__ == '__main__':
    unittest.main()
