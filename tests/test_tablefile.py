import io
import json
import unittest

from armtarget import targetparser as tp
from armtarget.tablefile import ParseError, parse_tables, serialize_tables
from armtarget.tables import default_tables

_minimal = {
    'baseline': 'armv8-a',
    'extensions': [
        {'name': 'crc', 'id': 1, 'cpu_feature': 10,
         'feature': '+crc', 'neg_feature': '-crc'},
        {'name': 'lse', 'id': 8, 'cpu_feature': 7,
         'feature': '+lse', 'neg_feature': '-lse'},
        {'name': 'internal', 'id': 9, 'cpu_feature': 63},
    ],
    'architectures': [
        {'name': 'armv8-a', 'sub_arch': 'v8a', 'extensions': []},
        {'name': 'armv8.1-a', 'sub_arch': 'v8.1a', 'extensions': ['crc', 'lse']},
    ],
    'cpus': [
        {'name': 'test-cpu', 'arch': 'armv8.1-a', 'extensions': ['internal']},
    ],
    'aliases': [
        {'alias': 'tc', 'name': 'test-cpu'},
    ],
}

def _load(data: dict):
    return parse_tables(io.StringIO(json.dumps(data)))

class TestTableParsing(unittest.TestCase):
    def test_parse_minimal(self):
        tables = _load(_minimal)
        self.assertEqual(len(tables.extensions), 3)
        self.assertEqual(tables.baseline.name, 'armv8-a')

        cpu = tp.parse_cpu('tc', tables)
        self.assertIsNotNone(cpu)
        self.assertEqual(cpu.name, 'test-cpu')
        self.assertIs(cpu.arch, tables.archs[1])
        self.assertEqual(tp.get_implied_features('tc', tables),
                         ['+crc', '+lse'])

        self.assertEqual(tp.get_arch_ext_feature('internal', tables), '')
        self.assertEqual(tp.get_arch_ext_feature('nolse', tables), '-lse')
        self.assertEqual(tp.get_cpu_supports_mask(['crc', 'lse'], tables),
                         (1 << 10) | (1 << 7))
        self.assertIs(tp.parse_arch('v8.1a', tables), tables.archs[1])

    def test_missing_key(self):
        for key in ['baseline', 'extensions', 'architectures', 'cpus',
                    'aliases']:
            data = dict(_minimal)
            del data[key]
            self.assertRaises(ParseError, _load, data)

    def test_empty_aliases(self):
        data = dict(_minimal)
        data['aliases'] = []
        self.assertEqual(_load(data).aliases, ())

    def test_unknown_references(self):
        data = json.loads(json.dumps(_minimal))
        data['cpus'][0]['arch'] = 'armv7-a'
        self.assertRaises(ParseError, _load, data)

        data = json.loads(json.dumps(_minimal))
        data['architectures'][0]['extensions'] = ['bogus']
        self.assertRaises(ParseError, _load, data)

        data = json.loads(json.dumps(_minimal))
        data['baseline'] = 'armv9-a'
        self.assertRaises(ParseError, _load, data)

    def test_cpu_feature_out_of_range(self):
        data = json.loads(json.dumps(_minimal))
        data['extensions'][0]['cpu_feature'] = 64
        self.assertRaises(ParseError, _load, data)

    def test_extension_id_out_of_range(self):
        for ext_id in [128, 200, -1]:
            data = json.loads(json.dumps(_minimal))
            data['extensions'][0]['id'] = ext_id
            self.assertRaises(ParseError, _load, data)

        data = json.loads(json.dumps(_minimal))
        data['extensions'][0]['id'] = 127
        self.assertEqual(_load(data).extensions[0].id, 127)

    def test_non_integer_positions(self):
        for key in ['id', 'cpu_feature']:
            for val in ['10', 10.5, True, [10]]:
                data = json.loads(json.dumps(_minimal))
                data['extensions'][0][key] = val
                self.assertRaises(ParseError, _load, data)

class TestTableSerialization(unittest.TestCase):
    def test_builtin_tables(self):
        stream = io.StringIO()
        serialize_tables(default_tables, stream)
        stream.seek(0)
        tables = parse_tables(stream)

        self.assertEqual(tables.baseline, default_tables.baseline)
        self.assertEqual(tables.archs, default_tables.archs)
        self.assertEqual(tables.cpus, default_tables.cpus)
        self.assertEqual(tables.extensions, default_tables.extensions)
        self.assertEqual(tables.aliases, default_tables.aliases)

        for new, old in zip(tables.archs, default_tables.archs):
            self.assertEqual(new.default_extensions, old.default_extensions)
        for new, old in zip(tables.cpus, default_tables.cpus):
            self.assertEqual(new.default_extensions, old.default_extensions)
        for new, old in zip(tables.extensions, default_tables.extensions):
            self.assertEqual(new.cpu_feature, old.cpu_feature)
            self.assertEqual(new.feature, old.feature)
            self.assertEqual(new.neg_feature, old.neg_feature)

if __name__ == '__main__':
    unittest.main()
