"""
Exceptions raised while analysing a class under test.
"""


class ScaffoldError(Exception):
    """Base class for every failure that aborts a scaffolding run."""


class ParseError(ScaffoldError):
    """The source file could not be parsed as TypeScript."""

    def __init__(self, file_name: str, line: int, column: int, reason: str = "syntax error"):
        self.file_name = file_name
        self.line = line
        self.column = column
        super().__init__(f"Could not parse {file_name}: {reason} at line {line}, column {column}")


class NoClassFoundError(ScaffoldError):
    """The source file declares no class that could be spec-ed."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"No classes found to be spec-ed in {file_name}!")


class MissingSourceFileError(ScaffoldError):
    """The class under test file is missing or empty."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"The file {file_name} is missing or empty.")


class SpecFileExistsError(ScaffoldError):
    """The spec file already exists and overwriting was not requested."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"The spec file {path} already exists (use --force to overwrite it).")
