"""Errors surfaced to the user while creating or configuring a project."""


class NextPlusError(Exception):
    """Base class for every error the CLI reports to the user."""


class ValidationError(NextPlusError):
    """User-supplied or stored input failed validation."""


class ConfigError(NextPlusError):
    """The configuration file or a configuration value is unusable."""


class PathError(NextPlusError):
    """A configured path is missing or is not a directory."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ProcessLaunchError(NextPlusError):
    """An external command could not be started."""

    def __init__(self, command_line, cause):
        self.command_line = command_line
        self.cause = cause
        super().__init__(f"Could not start '{command_line}': {cause}")


class ProcessExitError(NextPlusError):
    """An external command finished with a non-zero or unknown exit code."""

    def __init__(self, label, returncode):
        self.label = label
        self.returncode = returncode
        code = "unknown" if returncode is None else returncode
        super().__init__(f"{label} exited with code {code}")
