"""
Tests for the identifier symbol table.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from javalex.lexer.symbol_table import SymbolTable


class TestSymbolTable(unittest.TestCase):

    def setUp(self):
        self.table = SymbolTable()

    def test_empty(self):
        self.assertEqual(len(self.table), 0)
        self.assertEqual(self.table.entries(), [])
        self.assertEqual(self.table.count("x"), 0)

    def test_record_returns_running_count(self):
        self.assertEqual(self.table.record("x"), 1)
        self.assertEqual(self.table.record("x"), 2)
        self.assertEqual(self.table.count("x"), 2)

    def test_order_is_first_appearance(self):
        for name in ["goldCoins", "name", "goldCoins", "args", "name", "goldCoins"]:
            self.table.record(name)
        self.assertEqual(self.table.entries(),
                         [("goldCoins", 3), ("name", 2), ("args", 1)])
        self.assertEqual(list(self.table), ["goldCoins", "name", "args"])

    def test_membership_and_dict_view(self):
        self.table.record("a")
        self.assertIn("a", self.table)
        self.assertNotIn("b", self.table)
        snapshot = self.table.to_dict()
        snapshot["a"] = 99
        self.assertEqual(self.table.count("a"), 1)

    def test_case_sensitive_keys(self):
        self.table.record("Foo")
        self.table.record("foo")
        self.assertEqual(len(self.table), 2)


if __name__ == '__main__':
    unittest.main()
