"""Completion options.

Options are supplied per request, merged with the defaults and validated once.
A validation failure is a programming error and is raised immediately.
"""

import os
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt

from asyncpath.domain.types import CursorContext
from asyncpath.logger import get_logger

logger = get_logger("config")

ENV_PREFIX = "ASYNCPATH_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_get_cwd(context: CursorContext) -> str:
    """Directory containing the edited buffer, or the process cwd without one."""
    if context.buffer_path:
        return os.path.dirname(os.path.abspath(context.buffer_path))
    return os.getcwd()


class PathCompletionOptions(BaseModel):
    """Options for one completion request."""

    trailing_slash: StrictBool = Field(
        default=False,
        description="Keep the trailing separator in the word used for directory entries",
    )
    label_trailing_slash: StrictBool = Field(
        default=True,
        description="Show a trailing separator in directory labels",
    )
    get_cwd: Callable[[CursorContext], str] = Field(
        default=default_get_cwd,
        validation_alias=AliasChoices("get_cwd", "cwd_provider"),
        description="Base directory for relative resolution",
    )
    show_hidden_files_by_default: StrictBool = Field(
        default=False,
        description="Include dot-files even without a '.' next to the cursor",
    )
    max_lines: StrictInt = Field(
        default=20,
        description="Maximum preview lines for documentation; negative means unbounded",
    )

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @classmethod
    def merge(
        cls, overrides: Optional[Union["PathCompletionOptions", Mapping[str, Any]]] = None
    ) -> "PathCompletionOptions":
        """
        Merge per-request overrides with the defaults.

        Args:
            overrides: None, an options instance, or a mapping of option names

        Returns:
            Validated options

        Raises:
            ValidationError: If a value has the wrong type or a key is unknown
        """
        if overrides is None:
            return cls()
        if isinstance(overrides, cls):
            return overrides
        return cls.model_validate(dict(overrides))

    def cwd_for(self, context: CursorContext) -> str:
        """Base directory for ``context``; the process cwd in command-line mode."""
        if context.command_line_mode:
            return os.getcwd()
        return self.get_cwd(context)


def load_options_from_env(environ: Optional[Mapping[str, str]] = None) -> PathCompletionOptions:
    """
    Build options from ``ASYNCPATH_*`` environment variables.

    Recognised variables: ``ASYNCPATH_TRAILING_SLASH``,
    ``ASYNCPATH_LABEL_TRAILING_SLASH``, ``ASYNCPATH_SHOW_HIDDEN`` and
    ``ASYNCPATH_MAX_LINES``. Unset variables keep their defaults.

    Raises:
        ValueError: If a variable holds something that is not a boolean or integer
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for var, field in (
        ("TRAILING_SLASH", "trailing_slash"),
        ("LABEL_TRAILING_SLASH", "label_trailing_slash"),
        ("SHOW_HIDDEN", "show_hidden_files_by_default"),
    ):
        raw = env.get(ENV_PREFIX + var)
        if raw is not None:
            values[field] = _parse_bool(ENV_PREFIX + var, raw)

    raw_max = env.get(ENV_PREFIX + "MAX_LINES")
    if raw_max is not None:
        try:
            values["max_lines"] = int(raw_max)
        except ValueError as e:
            raise ValueError(f"{ENV_PREFIX}MAX_LINES must be an integer, got {raw_max!r}") from e

    if values:
        logger.debug(f"Options from environment: {values}")
    return PathCompletionOptions.merge(values)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
