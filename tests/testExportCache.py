#!/usr/bin/python

import json
import logging
import os
import shutil
import tempfile
import unittest

from clear2mangled.C2mConfig import C2mConfig
from clear2mangled.common.C2mExceptions import CacheFileError
from clear2mangled.common.DeclarationDetails import DeclarationDetails
from clear2mangled.common.Export import Export
from clear2mangled.common.ExportIndex import ExportIndex
from clear2mangled.utility.ExportCache import ExportCache

from .context import config

LOG = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)-15s %(message)s")
logging.disable(logging.CRITICAL)


def createExportIndex():
    exports = [
        Export(1, 0x1000, "?Foo@N@@SAXH@Z", "void N::Foo(int)", DeclarationDetails(name="Foo", parentheses_pairs=["(int)"])),
        Export(2, 0x2000, "_Chmod", "_Chmod", DeclarationDetails(c_function=True, name="_Chmod")),
        Export(3, 0x3000, "??_7N@@6B@", "const N::vftable", DeclarationDetails(variable=True, name="vftable")),
        Export(4, 0x4000, "??1N@@QEAA@XZ", "N::~N(void)", DeclarationDetails(destructor_function=True, name="~N", parentheses_pairs=["(void)"])),
        Export(4, 0x4000, "??1N@@QEAA@XZ", "N::~N(void) const", DeclarationDetails(destructor_function=True, name="~N", parentheses_pairs=["(void)"])),
    ]
    return ExportIndex("test.dll", exports)


class ExportCacheTestSuite(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def testRoundTrip(self):
        export_index = createExportIndex()
        cache_file_path = os.path.join(self.tmp_dir, "test.dll.json")
        ExportCache.save(export_index, cache_file_path)
        loaded_index = ExportCache.load(cache_file_path)
        self.assertEqual(loaded_index, export_index)
        self.assertEqual([export.ordinal for export in loaded_index], [1, 2, 3, 4, 4])
        self.assertEqual(loaded_index.filename, "test.dll")

    def testEmptyRoundTrip(self):
        cache_file_path = os.path.join(self.tmp_dir, "empty.dll.json")
        ExportCache.save(ExportIndex("empty.dll"), cache_file_path)
        self.assertEqual(len(ExportCache.load(cache_file_path)), 0)

    def testFileLayout(self):
        cache_file_path = os.path.join(self.tmp_dir, "test.dll.json")
        ExportCache.save(createExportIndex(), cache_file_path)
        with open(cache_file_path, "r") as fin:
            cache_content = json.load(fin)
        self.assertIsInstance(cache_content, list)
        self.assertEqual(set(cache_content[0].keys()), {"ordinal", "rva", "mangled_declaration", "clear_declaration", "declaration_details"})
        self.assertEqual(
            set(cache_content[0]["declaration_details"].keys()),
            {"c_function", "variable", "constructor_function", "destructor_function", "name", "parentheses_pairs"},
        )
        self.assertEqual(cache_content[0]["rva"], 0x1000)
        self.assertEqual(cache_content[0]["declaration_details"]["parentheses_pairs"], ["(int)"])
        self.assertTrue(cache_content[1]["declaration_details"]["c_function"])

    def testCachePath(self):
        cache = ExportCache(config)
        cache_file_path = cache.getCachePath(os.path.join("some", "dir", "msvcp140.dll"))
        self.assertEqual(os.path.basename(cache_file_path), "msvcp140.dll.json")
        self.assertEqual(os.path.dirname(cache_file_path), config.CACHE_PATH)

    def testHasCache(self):
        cache_config = C2mConfig()
        cache_config.CACHE_PATH = self.tmp_dir
        cache = ExportCache(cache_config)
        self.assertFalse(cache.hasCache("test.dll"))
        ExportCache.save(createExportIndex(), cache.getCachePath(os.path.join("some", "dir", "test.dll")))
        self.assertTrue(cache.hasCache("test.dll"))

    def testSaveCreatesDirectory(self):
        cache_file_path = os.path.join(self.tmp_dir, "cache", "test.dll.json")
        ExportCache.save(createExportIndex(), cache_file_path)
        self.assertTrue(os.path.isfile(cache_file_path))

    def testSaveFailure(self):
        blocking_file = os.path.join(self.tmp_dir, "not_a_dir")
        with open(blocking_file, "w") as fout:
            fout.write("")
        with self.assertRaises(CacheFileError):
            ExportCache.save(createExportIndex(), os.path.join(blocking_file, "test.dll.json"))

    def testLoadFailures(self):
        with self.assertRaises(CacheFileError):
            ExportCache.load(os.path.join(self.tmp_dir, "missing.json"))
        broken_json = os.path.join(self.tmp_dir, "broken.json")
        with open(broken_json, "w") as fout:
            fout.write("[{\"ordinal\": 1,")
        with self.assertRaises(CacheFileError):
            ExportCache.load(broken_json)
        missing_field = os.path.join(self.tmp_dir, "missing_field.json")
        with open(missing_field, "w") as fout:
            json.dump([{"ordinal": 1, "rva": 4096}], fout)
        with self.assertRaises(CacheFileError):
            ExportCache.load(missing_field)
        not_a_list = os.path.join(self.tmp_dir, "object.json")
        with open(not_a_list, "w") as fout:
            json.dump({"ordinal": 1}, fout)
        with self.assertRaises(CacheFileError):
            ExportCache.load(not_a_list)


if __name__ == "__main__":
    unittest.main()
