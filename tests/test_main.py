import contextlib
import io
import os
import tempfile
import unittest

from letcalc.main import main, parse_args


class MainTestCase(unittest.TestCase):

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            main(argv)
        return out.getvalue(), err.getvalue()

    def write_file(self, text):
        fd, path = tempfile.mkstemp(suffix=".lc")
        with os.fdopen(fd, "w") as file:
            file.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_parse_args(self):
        args = parse_args([])
        self.assertIsNone(args.file)
        self.assertEqual("name", args.strategy)
        self.assertFalse(args.tree)

        args = parse_args(["prog.lc", "-s", "value", "--tree"])
        self.assertEqual("prog.lc", args.file)
        self.assertEqual("value", args.strategy)
        self.assertTrue(args.tree)

    def test_bad_strategy(self):
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, parse_args, ["-s", "need"])

    def test_file(self):
        path = self.write_file("3\n(3\ny\nlet x = 1 in let x = 2 in x\n\\x -> x\n")
        out, err = self.run_main([path])
        self.assertEqual("3\nerror\n2\n(\\x -> x)\n", out)
        self.assertIn("Expected ')' @2", err)
        self.assertIn("Variable not found: 'y'", err)

    def test_missing_file(self):
        with self.assertRaises(SystemExit):
            self.run_main([os.path.join(tempfile.gettempdir(), "does-not-exist.lc")])


if __name__ == '__main__':
    unittest.main()
