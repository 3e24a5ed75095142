"""Handles interactive mode for the letcalc interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """letcalc interpreter shell."""
    intro = "letcalc interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Executes an arbitrary letcalc line."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            result = self.sess.execute(line)
            if result is not None:
                print(result, file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the letcalc interpreter!\n\n"
              "letcalc is the untyped lambda calculus with integers and let bindings. Lambdas are \n"
              "written '\\x -> x', application is juxtaposition and 'let x = 5 in x' binds a name.\n\n"
              "Try it out by typing '(\\f -> \\x -> f x) (\\y -> y) 9'. Every line is evaluated on \n"
              "its own: bindings do not carry over to the next line.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
