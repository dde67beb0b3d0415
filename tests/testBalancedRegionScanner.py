#!/usr/bin/python

import logging
import unittest

from clear2mangled.declaration.BalancedRegionScanner import BalancedRegionScanner

LOG = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)-15s %(message)s")
logging.disable(logging.CRITICAL)


class BalancedRegionScannerTestSuite(unittest.TestCase):

    def testParenthesesGroups(self):
        self.assertEqual(BalancedRegionScanner.findTopLevelRegions("f(a)(b(c))x", "(", ")"), ["(a)", "(b(c))"])
        self.assertEqual(BalancedRegionScanner.findTopLevelRegions("void N::call(void (*)(int),int)", "(", ")"), ["(void (*)(int),int)"])
        self.assertEqual(BalancedRegionScanner.findTopLevelRegions("_Chmod", "(", ")"), [])

    def testDeepNesting(self):
        text = "x" + "(" * 10 + "y" + ")" * 10 + "z"
        self.assertEqual(BalancedRegionScanner.findTopLevelRegions(text, "(", ")"), ["(" * 10 + "y" + ")" * 10])

    def testConcatenatedGroups(self):
        groups = ["(x)", "((y))", "(a(b)c(d))", "()"]
        plain = ["p", "q r", "", "s", "t"]
        text = plain[0]
        for group, suffix in zip(groups, plain[1:]):
            text += group + suffix
        self.assertEqual(BalancedRegionScanner.findTopLevelRegions(text, "(", ")"), groups)

    def testSpans(self):
        self.assertEqual(BalancedRegionScanner.findTopLevelSpans("ab(c)d", "(", ")"), [(2, 5)])

    def testUnbalanced(self):
        test_cases = [
            ("Stray closing delimiter", "a)(b)", ["(b)"]),
            ("Unclosed trailing group", "(a)(b", ["(a)"]),
            ("Only unclosed", "a(b(c)", []),
            ("Only closing", "a)b)", []),
        ]
        for name, text, expected in test_cases:
            with self.subTest(msg=name):
                self.assertEqual(BalancedRegionScanner.findTopLevelRegions(text, "(", ")"), expected)

    def testRemoveTemplateArguments(self):
        test_cases = [
            ("std::vector<int,std::allocator<int>>::push_back", "std::vector::push_back"),
            ("a<b>c<d<e>>f", "acf"),
            ("no templates", "no templates"),
            ("N::operator<", "N::operator<"),
            ("N::operator>", "N::operator>"),
            ("", ""),
        ]
        for text, expected in test_cases:
            with self.subTest(msg=text):
                self.assertEqual(BalancedRegionScanner.removeTopLevelRegions(text, "<", ">"), expected)


if __name__ == "__main__":
    unittest.main()
