"""Positional argument validation and command initialisation options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence


class ArgumentError(ValueError):
    """Raised when a command receives the wrong number of positional args."""


Validation = Callable[[Any, Sequence[str]], None]


def no_args(command: Any, args: Sequence[str]) -> None:
    """Reject any positional arguments."""
    if len(args) != 0:
        raise ArgumentError("this command takes no args")


def minimum_n_args(n: int) -> Validation:
    """Build a validator that requires at least ``n`` arguments."""

    def validate(command: Any, args: Sequence[str]) -> None:
        if len(args) < n:
            raise ArgumentError(
                f"this command requires at least {n} arg(s), received {len(args)}"
            )

    return validate


def maximum_n_args(n: int) -> Validation:
    """Build a validator that accepts at most ``n`` arguments."""

    def validate(command: Any, args: Sequence[str]) -> None:
        if len(args) > n:
            raise ArgumentError(
                f"this command accepts at most {n} arg(s), received {len(args)}"
            )

    return validate


def exact_args(n: int) -> Validation:
    """Build a validator that requires exactly ``n`` arguments."""

    def validate(command: Any, args: Sequence[str]) -> None:
        if len(args) != n:
            raise ArgumentError(
                f"this command requires exactly {n} args(s), received {len(args)}"
            )

    return validate


@dataclass
class BaseConfig:
    """Settings gathered from options before a command runs."""

    args: list[str] = field(default_factory=list)
    flags: Any = None
    config: bool = True
    config_optional: bool = False
    client: bool = True
    app_target_required: bool = False
    ui: Any = None
    validation: Optional[Validation] = None

    def validate(self, command: Any) -> None:
        """Run the configured validation against the positional args."""
        if self.validation is not None:
            self.validation(command, self.args)


Option = Callable[[BaseConfig], None]


def with_args(args: Sequence[str]) -> Option:
    """Set the arguments used for parsing."""

    def apply(config: BaseConfig) -> None:
        config.args = list(args)

    return apply


def _with_validation(args: Sequence[str], validation: Validation) -> Option:
    def apply(config: BaseConfig) -> None:
        config.args = list(args)
        config.validation = validation

    return apply


def with_no_args(args: Sequence[str]) -> Option:
    """Set the arguments and require that none remain after flag parsing."""
    return _with_validation(args, no_args)


def with_minimum_n_args(n: int, args: Sequence[str]) -> Option:
    """Set the arguments and require at least ``n`` of them."""
    return _with_validation(args, minimum_n_args(n))


def with_maximum_n_args(n: int, args: Sequence[str]) -> Option:
    """Set the arguments and allow at most ``n`` of them."""
    return _with_validation(args, maximum_n_args(n))


def with_exact_args(n: int, args: Sequence[str]) -> Option:
    """Set the arguments and require exactly ``n`` of them."""
    return _with_validation(args, exact_args(n))


def with_custom_args(args: Sequence[str], validation: Validation) -> Option:
    """Set the arguments with a caller-supplied validation function."""
    return _with_validation(args, validation)


def with_single_app() -> Option:
    """Expect a single targeted app; no project configuration is read."""

    def apply(config: BaseConfig) -> None:
        config.app_target_required = True
        config.config = False
        config.client = True

    return apply


def with_no_config() -> Option:
    """Do not read any project configuration."""

    def apply(config: BaseConfig) -> None:
        config.config = False

    return apply


def with_config(optional: bool) -> Option:
    """Load project configuration; a missing one is fine when optional."""

    def apply(config: BaseConfig) -> None:
        config.config = True
        config.config_optional = optional

    return apply


def with_client(value: bool) -> Option:
    """Choose whether a client is initialised."""

    def apply(config: BaseConfig) -> None:
        config.client = value

    return apply


def apply_options(options: Iterable[Option]) -> BaseConfig:
    """Build a BaseConfig from defaults and the given options, in order."""
    config = BaseConfig()
    for option in options:
        option(config)
    return config