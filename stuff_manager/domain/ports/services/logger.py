from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam so use cases and client components stay framework free."""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None: ...
