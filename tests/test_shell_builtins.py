import os
import tempfile
import unittest
from unittest.mock import patch

from minish import shell_builtins
from minish.exceptions import BuiltinError, HomeNotSet, NoSuchDirectory, TooManyArguments


class TestRegistry(unittest.TestCase):
    def test_default_registry_contains_expected_builtins(self):
        registry = shell_builtins.default_registry()
        for name in ("echo", "pwd", "type"):
            self.assertIn(name, registry)

    def test_exit_and_cd_are_builtins_without_handlers(self):
        registry = shell_builtins.default_registry()
        for name in ("exit", "cd"):
            self.assertTrue(registry.is_builtin(name))
            self.assertIsNone(registry.get(name))

    def test_unknown_name_is_not_builtin(self):
        registry = shell_builtins.default_registry()
        self.assertFalse(registry.is_builtin("ls"))
        self.assertIsNone(registry.get("ls"))

    def test_registry_is_a_snapshot(self):
        handlers = {"foo": lambda args, registry: "foo"}
        registry = shell_builtins.BuiltinRegistry(handlers)
        handlers["bar"] = lambda args, registry: "bar"

        self.assertIn("foo", registry)
        self.assertNotIn("bar", registry)
        self.assertEqual(["foo"], list(registry))
        self.assertEqual(1, len(registry))


class TestBuiltins(unittest.TestCase):
    def setUp(self):
        self.registry = shell_builtins.default_registry()

    def run_builtin(self, name, args):
        return self.registry.get(name)(args, self.registry)

    def test_echo_joins_args(self):
        self.assertEqual("a b  c", self.run_builtin("echo", ["a", "b ", "c"]))

    def test_echo_without_args(self):
        self.assertEqual("", self.run_builtin("echo", []))

    def test_pwd_returns_cwd(self):
        self.assertEqual(os.getcwd(), self.run_builtin("pwd", []))

    @patch.object(shell_builtins.os, "getcwd", side_effect=FileNotFoundError(2, "No such file or directory"))
    def test_pwd_failure_is_builtin_error(self, _mock_getcwd):
        with self.assertRaises(BuiltinError) as cm:
            self.run_builtin("pwd", [])
        self.assertEqual("pwd: No such file or directory", str(cm.exception))

    def test_type_reports_builtins(self):
        out = self.run_builtin("type", ["echo", "exit", "cd", "type"])
        self.assertEqual(
            "echo is a shell builtin\n"
            "exit is a shell builtin\n"
            "cd is a shell builtin\n"
            "type is a shell builtin",
            out,
        )

    @patch.object(shell_builtins.runner, "find_executable")
    def test_type_reports_path_and_missing(self, mock_find):
        mock_find.side_effect = lambda name: "/usr/bin/ls" if name == "ls" else None
        out = self.run_builtin("type", ["ls", "nosuchcmd"])
        self.assertEqual("ls is /usr/bin/ls\nnosuchcmd: not found", out)

    def test_type_uses_the_given_registry(self):
        registry = shell_builtins.BuiltinRegistry({"hello": lambda args, registry: "hi"})
        out = shell_builtins.builtin_type(["hello"], registry)
        self.assertEqual("hello is a shell builtin", out)


class TestChangeDirectory(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.old_cwd = os.getcwd()
        os.chdir(self.tmpdir.name)
        self.addCleanup(lambda: os.chdir(self.old_cwd))

        self.subdir = os.path.join(self.tmpdir.name, "sub")
        os.mkdir(self.subdir)
        self.home = os.path.join(self.tmpdir.name, "home")
        os.mkdir(self.home)

    def assertCwd(self, path):
        self.assertEqual(os.path.realpath(path), os.path.realpath(os.getcwd()))

    def test_too_many_arguments_leaves_cwd(self):
        with self.assertRaises(TooManyArguments) as cm:
            shell_builtins.change_directory(["sub", "home"])
        self.assertEqual("cd: too many arguments", str(cm.exception))
        self.assertCwd(self.tmpdir.name)

    def test_relative_path(self):
        shell_builtins.change_directory(["sub"])
        self.assertCwd(self.subdir)

    def test_absolute_path(self):
        shell_builtins.change_directory([self.home])
        self.assertCwd(self.home)

    def test_no_args_goes_home(self):
        with patch.dict(os.environ, {"HOME": self.home}):
            shell_builtins.change_directory([])
        self.assertCwd(self.home)

    def test_tilde_goes_home(self):
        with patch.dict(os.environ, {"HOME": self.home}):
            shell_builtins.change_directory(["~"])
        self.assertCwd(self.home)

    def test_home_not_set(self):
        with patch.dict(os.environ):
            os.environ.pop("HOME", None)
            with self.assertRaises(HomeNotSet):
                shell_builtins.change_directory([])
        self.assertCwd(self.tmpdir.name)

    def test_home_empty(self):
        with patch.dict(os.environ, {"HOME": ""}):
            with self.assertRaises(HomeNotSet):
                shell_builtins.change_directory(["~"])

    def test_missing_directory(self):
        with self.assertRaises(NoSuchDirectory) as cm:
            shell_builtins.change_directory(["nope"])
        self.assertEqual("cd: nope: No such file or directory", str(cm.exception))
        self.assertCwd(self.tmpdir.name)

    def test_file_is_not_a_directory(self):
        with open("plain.txt", "w", encoding="utf-8") as f:
            f.write("x")
        with self.assertRaises(NoSuchDirectory):
            shell_builtins.change_directory(["plain.txt"])
        self.assertCwd(self.tmpdir.name)


if __name__ == "__main__":
    unittest.main()
