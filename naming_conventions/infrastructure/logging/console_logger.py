from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    target: str = ""
    derivation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "inferences": 0,
        "fallbacks": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_inference(self, derivation: str, subject: str, name: str) -> None:
        self._stats["inferences"] += 1
        self.set_context(derivation=derivation)
        self.verbose(f"{derivation}: {escape(subject)} → {name}")

    @override
    def log_fallback(self, derivation: str, subject: str, reason: str) -> None:
        self._stats["fallbacks"] += 1
        self.set_context(derivation=derivation)
        self.debug(f"{derivation}: {escape(subject)} falls back ({reason})")

    @override
    def log_inference_failed(
        self, derivation: str, subject: str, reason: str
    ) -> None:
        self._stats["errors"] += 1
        self.set_context(derivation=derivation)
        self.debug(f"{derivation}: {escape(subject)} failed: {escape(reason)}")

    @override
    def log_target_start(self, target: str) -> None:
        self._context = LogContext(target=target)
        self.verbose(f"Inspecting {escape(target)}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Inference Statistics:[/dim]")
            self.console.print(
                f"[dim]  Names derived: {self._stats['inferences']}[/dim]"
            )
            self.console.print(
                f"[dim]  Runtime fallbacks: {self._stats['fallbacks']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )
            if self._context is not None:
                self.console.print(
                    f"[dim]  Elapsed: {self._context.elapsed_ms():.1f} ms[/dim]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.target:
            parts.append(self._context.target)
        if self._context.derivation:
            parts.append(self._context.derivation)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
