"""Parsing options and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

ENV_INCLUDE_FZ = "EPP2JSON_INCLUDE_FZ"
ENV_INCLUDE_FS = "EPP2JSON_INCLUDE_FS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


@dataclass(frozen=True)
class ParseOptions:
    """Which invoice families the parser keeps.

    ``include_fz`` and ``include_fs`` only gate the credit notes ``KFZ`` and
    ``KFS``; plain ``FZ`` and ``FS`` invoices are always kept.
    """

    include_fz: bool = True
    include_fs: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ParseOptions":
        """Build options from ``EPP2JSON_INCLUDE_FZ``/``EPP2JSON_INCLUDE_FS``."""

        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            include_fz=_env_flag(env, ENV_INCLUDE_FZ, defaults.include_fz),
            include_fs=_env_flag(env, ENV_INCLUDE_FS, defaults.include_fs),
        )

    def restricted(self, *, fz_only: bool = False, fs_only: bool = False) -> "ParseOptions":
        """Apply the ``--fz-only``/``--fs-only`` command line switches."""

        options = self
        if fz_only:
            options = replace(options, include_fs=False)
        if fs_only:
            options = replace(options, include_fz=False)
        return options


def default_parse_options() -> ParseOptions:
    """Return options keeping every invoice family."""

    return ParseOptions()


__all__ = ["ENV_INCLUDE_FS", "ENV_INCLUDE_FZ", "ParseOptions", "default_parse_options"]
