"""Exception types raised by termedit."""


class TermeditError(Exception):
    """Base class for termedit errors."""


class TerminalError(TermeditError):
    """The controlling terminal failed; the editor cannot continue."""


class RuleFileError(TermeditError):
    """A syntax rule file exists but cannot be parsed."""
