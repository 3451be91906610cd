"""Structured event logger for the parser and its command line."""

from __future__ import annotations

import logging
import os


class TMILogger:
    """Thin wrapper emitting ``domain_action`` events on a stdlib logger.

    Handlers are never installed here; the library stays silent unless the
    application (or :class:`tmi_parser.logging_config.LoggerConfigurator`)
    configures logging.
    """

    def __init__(self, name: str = "tmi_parser") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 24
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        msg = (
            self._build_debug_message(event_name, human_text, kwargs)
            if self._is_verbose()
            else self._build_concise_message(human_text, kwargs)
        )
        self.logger.log(level, msg, exc_info=exc_info)

    def _is_verbose(self) -> bool:
        # DEBUG in the environment, or a logger lowered to DEBUG (tmi-parser --debug)
        if os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes"):
            return True
        return self.logger.isEnabledFor(logging.DEBUG)

    @staticmethod
    def _build_prefix(command: object) -> str:
        label = str(command) if isinstance(command, str) and command else "tmi"
        return f"[{label.ljust(15)[:15]}]"

    def _build_debug_message(
        self, event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {self._build_prefix(kwargs.get('command'))} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    def _build_concise_message(self, human_text: str, kwargs: dict[str, object]) -> str:
        return f"{self._build_prefix(kwargs.get('command'))} {human_text}"


logger = TMILogger()
