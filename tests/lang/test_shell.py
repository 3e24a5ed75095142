import io
import unittest

from letcalc.lang.error import ErrorHandler
from letcalc.lang.session import Session
from letcalc.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.shell = Shell(Session(ErrorHandler(fatal=False, stream=self.err)), stdout=self.out)

    def test_default(self):
        cases = ["3", "\\x -> x", "let x = 5 in x", "(\\x -> x) 7", "y", "(3"]
        for case in cases:
            self.assertFalse(self.shell.onecmd(case), case)
        self.assertEqual("3\n(\\x -> x)\n5\n7\nerror\n", self.out.getvalue())
        self.assertIn("Expected ')' @2", self.err.getvalue())

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        self.assertTrue(self.shell.onecmd("EOF"))

    def test_emptyline(self):
        self.assertFalse(self.shell.onecmd(""))
        self.assertEqual("", self.out.getvalue())

    def test_help(self):
        self.shell.onecmd("help")
        self.assertIn("letcalc", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
