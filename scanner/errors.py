"""Exceptions raised while scanning a project."""


class PagesDirNotFoundError(FileNotFoundError):
    """The pages root does not exist, so no page can be analyzed."""


class ScriptSyntaxError(SyntaxError):
    """A script region could not be parsed into a syntax tree."""
