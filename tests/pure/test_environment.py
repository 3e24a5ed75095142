import unittest

from letcalc.pure.environment import Environment, Thunk, Value
from letcalc.pure.term import Num, Var


class EnvironmentTestCase(unittest.TestCase):

    def test_empty(self):
        env = Environment.empty()
        self.assertTrue(env.is_empty)
        self.assertEqual(0, len(env))
        self.assertRaises(KeyError, env.lookup, "x")

    def test_shadowing(self):
        env = Environment.empty().extend("x", Value(Num(1))).extend("y", Value(Num(2))).extend("x", Value(Num(3)))
        self.assertEqual(Num(3), env.lookup("x").value)
        self.assertEqual(Num(2), env.lookup("y").value)
        self.assertEqual(["x", "y", "x"], env.names())
        self.assertIn("y", env)
        self.assertNotIn("z", env)

    def test_extend_does_not_modify_parent(self):
        parent = Environment.empty().extend("x", Value(Num(1)))
        child = parent.extend("x", Value(Num(2)))

        self.assertEqual(Num(1), parent.lookup("x").value)
        self.assertEqual(Num(2), child.lookup("x").value)
        self.assertEqual(1, len(parent))
        self.assertIs(parent, child.parent)

    def test_thunk_keeps_defining_environment(self):
        env = Environment.empty().extend("y", Value(Num(1)))
        thunk = Thunk(Var("y"), env)
        outer = Environment.empty().extend("x", thunk)

        self.assertIs(thunk, outer.lookup("x"))
        self.assertIs(env, outer.lookup("x").env)


if __name__ == '__main__':
    unittest.main()
