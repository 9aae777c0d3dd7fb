import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from chess_core.cli import main

_CLEAN_ENV = {"CHESS_CORE_SEED": "", "CHESS_CORE_MAX_DEPTH": "", "CHESS_CORE_LOG_LEVEL": "WARNING"}


class TestCLI(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    @mock.patch.dict(os.environ, _CLEAN_ENV)
    def test_perft(self):
        code, out = self._run(["perft", "--depth", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "400")

    @mock.patch.dict(os.environ, _CLEAN_ENV)
    def test_perft_divide(self):
        code, out = self._run(["perft", "--depth", "1", "--color", "black", "--divide"])
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(lines[-1], "Total: 20")
        self.assertIn("e2e4: 1", lines)

    @mock.patch.dict(os.environ, _CLEAN_ENV)
    def test_bestmove(self):
        code, out = self._run(["bestmove", "--level", "1", "--seed", "5", "--max-depth", "1"])
        self.assertEqual(code, 0)
        self.assertIn("bestmove ", out)
        self.assertIn("depth 1", out)

    @mock.patch.dict(os.environ, dict(_CLEAN_ENV, CHESS_CORE_MAX_DEPTH="deep"))
    def test_bad_env_is_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["perft", "--depth", "1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_bad_color(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["perft", "--color", "green"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
