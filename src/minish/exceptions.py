""" Exceptions raised by the shell. """


class ShellExit(Exception):
    """ Raised by `exit` to leave the read-eval-print loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors reported to the user without ending the shell. """


class ShellSyntaxError(ShellError):
    pass


class CommandNotFound(ShellError):
    def __init__(self, name):
        super().__init__(f"{name}: command not found")
        self.name = name


class BuiltinError(ShellError):
    pass


class TooManyArguments(BuiltinError):
    def __init__(self, name):
        super().__init__(f"{name}: too many arguments")


class HomeNotSet(BuiltinError):
    def __init__(self):
        super().__init__("cd: HOME not set")


class NoSuchDirectory(BuiltinError):
    def __init__(self, path):
        super().__init__(f"cd: {path}: No such file or directory")
        self.path = path


class SpawnError(ShellError):
    def __init__(self, name, reason):
        super().__init__(f"{name}: {reason}")
        self.name = name


class WriteError(ShellError):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path


class ReadError(ShellError):
    """ Standard input could not be read; fatal. """
