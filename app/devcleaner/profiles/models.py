"""Toolchain profile models.

A toolchain profile is pure data: how to recognise a project of one
ecosystem and which paths or tools clean it. These Pydantic models
describe the ``[profiles.<name>]`` tables in ``data/profiles.toml``
and in the user's ``config.toml``.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CommandSpec(BaseModel):
    """An external command-line tool invocation.

    Attributes:
        args: Executable and arguments.
        stdin: Text fed to the tool's stdin (e.g. ``"y\\n"`` answers).
        search_paths: Executable locations tried before the PATH lookup
            (``~`` is expanded), e.g. a tool's private virtualenv.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    args: Annotated[tuple[str, ...], Field(min_length=1, description="Command and arguments")]
    stdin: Annotated[str | None, Field(description="Text piped to stdin")] = None
    search_paths: Annotated[
        tuple[str, ...],
        Field(description="Executable locations preferred over PATH"),
    ] = ()

    @property
    def executable(self) -> str:
        """Name of the executable to look up on PATH."""
        return self.args[0]

    def display(self) -> str:
        """Render the command for log and table output."""
        return " ".join(self.args)


class RemovalAction(BaseModel):
    """A single ordered cleanup step for a project.

    Exactly one of ``targets`` or ``command`` is set: either a set of
    path templates to delete, or a tool to run inside the project root.

    Attributes:
        label: Short human-readable description of the step.
        targets: Path templates relative to the project root, absolute or
            ``~``-prefixed. Glob characters are expanded.
        command: Tool to run with the project root as working directory.
        precondition: Run the step only if this path (relative to the
            project root, absolute or ``~``-prefixed) exists.
        recursive: Delete directories recursively.
        requires_elevation: Delete through ``sudo``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: Annotated[str | None, Field(description="Step description")] = None
    targets: Annotated[tuple[str, ...], Field(description="Path templates to delete")] = ()
    command: Annotated[CommandSpec | None, Field(description="Tool to run in project")] = None
    precondition: Annotated[
        str | None,
        Field(description="Only run if this project-relative path exists"),
    ] = None
    recursive: Annotated[bool, Field(description="Delete directories recursively")] = True
    requires_elevation: Annotated[bool, Field(description="Delete with sudo")] = False

    @model_validator(mode="after")
    def validate_kind(self) -> "RemovalAction":
        """Ensure the action either removes paths or runs a command."""
        if bool(self.targets) == (self.command is not None):
            msg = "Action must define exactly one of 'targets' or 'command'"
            raise ValueError(msg)
        return self

    @property
    def is_command(self) -> bool:
        """Whether this action invokes an external tool."""
        return self.command is not None

    def describe(self) -> str:
        """Return the label, or a description derived from the action."""
        if self.label:
            return self.label
        if self.command is not None:
            return f"Run {self.command.display()}"
        return f"Remove {', '.join(self.targets)}"


class ToolchainProfile(BaseModel):
    """Static description of how to detect and clean one ecosystem.

    Attributes:
        name: Profile identifier (e.g. "flutter").
        description: Human-readable summary.
        manifest_pattern: Filename or glob identifying a project root
            (e.g. "pubspec.yaml", "*.sln"). Global profiles leave it unset:
            their actions run once against the home directory.
        actions: Ordered cleanup steps applied to every project.
        global_post_action: Tool run once after all projects are cleaned.
        skip_dirs: Directory names the scanner never descends into.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Profile identifier")]
    description: Annotated[str, Field(description="Profile summary")] = ""
    manifest_pattern: Annotated[
        str | None,
        Field(min_length=1, description="Project marker file (unset for global caches)"),
    ] = None
    actions: Annotated[tuple[RemovalAction, ...], Field(description="Ordered actions")] = ()
    global_post_action: Annotated[
        CommandSpec | None,
        Field(description="Tool run once after all projects"),
    ] = None
    skip_dirs: Annotated[tuple[str, ...], Field(description="Directories not scanned")] = ()

    @field_validator("manifest_pattern")
    @classmethod
    def validate_manifest_pattern(cls, v: str | None) -> str | None:
        """Reject patterns that contain a path separator."""
        if v is not None and ("/" in v or "\\" in v):
            msg = f"manifest_pattern must be a file name or glob, got '{v}'"
            raise ValueError(msg)
        return v

    @property
    def is_global(self) -> bool:
        """Whether this profile cleans home-level caches instead of projects."""
        return self.manifest_pattern is None
