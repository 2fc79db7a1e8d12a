"""
Diagnostics tests for LambdaScript scan errors.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lambdascript.scanner import ScanFailed, TokenPosition, UnrecognizedSymbol, scan
from lambdascript.scanner.errors import ErrorRecovery


class TestDiagnostics(unittest.TestCase):

    def test_rendering(self):
        diagnostic = UnrecognizedSymbol(TokenPosition(2, 5), "§").to_diagnostic("main.ls")
        self.assertEqual(diagnostic.code, "L001")
        self.assertEqual(diagnostic.severity, "error")
        text = str(diagnostic)
        self.assertTrue(text.startswith("ERROR[L001]: Unrecognized symbol: '§'"))
        self.assertIn("--> main.ls:2:5", text)

    def test_ascii_suggestions(self):
        diagnostic = UnrecognizedSymbol(TokenPosition(0, 0), "≠").to_diagnostic()
        self.assertEqual(diagnostic.suggestions, ["'!=' instead of '≠'"])
        self.assertIn("help: Did you mean", str(diagnostic))

    def test_suggestions_are_unique_and_limited(self):
        suggestions = ErrorRecovery.suggest_ascii_spellings("××≤≥∧∨")
        self.assertEqual(len(suggestions), 3)
        self.assertEqual(suggestions[0], "'*' instead of '×'")

    def test_builtin_help(self):
        diagnostic = UnrecognizedSymbol(TokenPosition(0, 0), "_print").to_diagnostic()
        self.assertIsNone(diagnostic.suggestions)
        self.assertIn("_name(...)", diagnostic.help_text)

    def test_non_printable_help(self):
        diagnostic = UnrecognizedSymbol(TokenPosition(0, 0), "\x07").to_diagnostic()
        self.assertIn("U+0007", diagnostic.help_text)

    def test_no_help_for_plain_symbol(self):
        diagnostic = UnrecognizedSymbol(TokenPosition(0, 0), "$").to_diagnostic()
        self.assertIsNone(diagnostic.help_text)
        self.assertNotIn("help:", str(diagnostic))


class TestScanFailed(unittest.TestCase):

    def test_message_lists_every_error(self):
        result = scan(["λx.x ≤ 1", "a § b"])
        with self.assertRaises(ScanFailed) as ctx:
            result.unwrap()
        failure = ctx.exception
        self.assertEqual([e.text for e in failure.errors], ["λx.x", "≤", "§"])
        message = str(failure)
        self.assertTrue(message.startswith("3 unrecognized symbol(s) in <input>"))
        self.assertIn("<input>:0:0", message)
        self.assertIn("<input>:1:2", message)
        self.assertEqual(len(failure.diagnostics), 3)


if __name__ == '__main__':
    unittest.main()
