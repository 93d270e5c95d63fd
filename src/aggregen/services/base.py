"""BaseService: shared foundation for aggregen services.

Every service receives the resolved :class:`AggConfig` and an optional
plugin manager. Lexis loading and event dispatch live here so that all
services report the same error codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aggregen.library.loader import LexisError, load_lexis
from aggregen.plugins.manager import PluginManager
from aggregen.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from aggregen.config.models import AggConfig
    from aggregen.library.dictionary import Dictionary

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes."""

    def __init__(self, config: AggConfig, plugins: PluginManager | None = None) -> None:
        self._config = config
        if plugins is None:
            plugins = PluginManager()
        if not plugins.is_loaded:
            plugins.discover_and_load()
        self._plugins = plugins

    def _load(self, op: str, lexis_path: Path) -> Dictionary | ServiceResult:
        """Load the lexis, or return the failure result explaining why not."""
        if not lexis_path.is_file():
            return ServiceResult.failure(
                op, "LEXIS_NOT_FOUND", f"Lexis file not found: {lexis_path}"
            )
        try:
            return load_lexis(
                lexis_path,
                default_weight=self._config.selection.default_weight,
                weight_key=self._config.library.weight_key,
            )
        except LexisError as exc:
            return ServiceResult.failure(op, "INVALID_LEXIS", str(exc))

    def _dispatch_event(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call a plugin hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.warning("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
