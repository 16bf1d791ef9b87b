"""Pydantic models for crgl."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    """Base for parsed subcommand records."""

    model_config = ConfigDict(frozen=True, extra='forbid')


class NewCommand(_Record):
    """Create a new project with ``cargo new`` (or ``cargo generate`` for templates)."""

    command: Literal['new'] = 'new'
    name: str
    template: str | None = None
    path: str | None = None
    git: bool = True
    bin: bool = False
    lib: bool = False
    edition: str | None = None
    quiet: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v.strip():
            msg = 'Project name cannot be empty'
            raise ValueError(msg)
        return v.strip()


class AddCommand(_Record):
    """Add a dependency with ``cargo add``."""

    command: Literal['add'] = 'add'
    name: str
    version: str | None = None
    features: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v.strip():
            msg = 'Dependency name cannot be empty'
            raise ValueError(msg)
        return v.strip()


class InitCommand(_Record):
    """Initialise a project in an existing directory with ``cargo init``."""

    command: Literal['init'] = 'init'
    path: str | None = None
    git: bool = False
    bin: bool = False
    lib: bool = False
    edition: str | None = None
    quiet: bool = False


class TemplateCommand(_Record):
    """Declares a template. Nothing is executed for it."""

    command: Literal['template'] = 'template'
    name: str
    path: str


class CargoCommand(_Record):
    """Raw passthrough to cargo."""

    command: Literal['cargo'] = 'cargo'
    commands: tuple[str, ...]

    @field_validator('commands')
    @classmethod
    def validate_commands(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that at least one cargo argument was given."""
        if not v:
            msg = 'At least one cargo argument is required'
            raise ValueError(msg)
        return v


CommandRecord = Annotated[
    NewCommand | AddCommand | InitCommand | TemplateCommand | CargoCommand,
    Field(discriminator='command'),
]


class RunOptions(BaseModel):
    """Settings shared by every subcommand for a single invocation."""

    model_config = ConfigDict(frozen=True)

    cargo: str = 'cargo'
    dry_run: bool = False
    verbose: bool = False
