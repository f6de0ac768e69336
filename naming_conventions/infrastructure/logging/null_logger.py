from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_inference(self, derivation: str, subject: str, name: str) -> None:
        return None

    @override
    def log_fallback(self, derivation: str, subject: str, reason: str) -> None:
        return None

    @override
    def log_inference_failed(
        self, derivation: str, subject: str, reason: str
    ) -> None:
        return None

    @override
    def log_target_start(self, target: str) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
