#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/cli/custom_actions.py
"""Custom argparse actions for CLI argument handling.

The actions record which options were given explicitly on the command line
(so configuration file values can fill in the rest) and read environment
variable defaults using the pattern ``MD2HTML_<DEST>``.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from md2html.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable name holding the default for ``dest``."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def parse_comma_list(value: str) -> tuple[str, ...]:
    """Split ``"a, b,,c"`` into ``("a", "b", "c")``."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


def provided_args(namespace: argparse.Namespace) -> set[str]:
    """Return the destinations given explicitly on the command line."""
    return getattr(namespace, "_provided_args", set())


class TrackingStoreAction(argparse.Action):
    """Store action that tracks whether an argument was explicitly provided.

    Also supports environment variable defaults using the pattern
    ``MD2HTML_<DEST>``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the action, reading an environment default if one is set."""
        env_key = env_key_for(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value and mark it as explicitly provided."""
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class TrackingBooleanAction(argparse.Action):
    """Paired ``--flag`` / ``--no-flag`` action that tracks explicit use.

    Options starting with ``--no-`` store False, all others store True. An
    environment variable ``MD2HTML_<DEST>`` overrides the default.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the boolean action, reading an environment default if one is set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the flag's value and mark it as explicitly provided."""
        setattr(namespace, self.dest, not (option_string or "").startswith("--no-"))
        _mark_provided(namespace, self.dest)


class TrackingStoreTrueAction(argparse.Action):
    """``store_true`` action that tracks whether the flag was explicitly provided."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the store_true action, reading an environment default if one is set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True and mark as explicitly provided."""
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)


class TrackingStoreFalseAction(argparse.Action):
    """``store_false`` action that tracks whether the flag was explicitly provided.

    The environment variable holds the value of the destination itself, so
    ``MD2HTML_STANDALONE=false`` has the same effect as ``--fragment``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = True,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the store_false action, reading an environment default if one is set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=False,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store False and mark as explicitly provided."""
        setattr(namespace, self.dest, False)
        _mark_provided(namespace, self.dest)


class TrackingCommaListAction(argparse.Action):
    """Accumulate comma separated values across repeated uses of an option.

    ``--hllang go,rust --hllang sql`` stores ``("go", "rust", "sql")``. An
    environment variable ``MD2HTML_<DEST>`` holding a comma separated list
    provides the default.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: Optional[Sequence[str]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[str] = None,
    ) -> None:
        """Initialize the list action, reading an environment default if one is set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = parse_comma_list(env_value)

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=tuple(default or ()),
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Extend the stored tuple; the first explicit use discards the default."""
        current = getattr(namespace, self.dest) if self.dest in provided_args(namespace) else ()
        setattr(namespace, self.dest, tuple(current) + parse_comma_list(str(values)))
        _mark_provided(namespace, self.dest)


__all__ = [
    "TrackingBooleanAction",
    "TrackingCommaListAction",
    "TrackingStoreAction",
    "TrackingStoreFalseAction",
    "TrackingStoreTrueAction",
    "env_key_for",
    "parse_comma_list",
    "provided_args",
]
