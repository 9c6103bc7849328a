from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict
from enum import Enum

from listequals.algorithms.utils import DiffKind, DiffEntry


class OutputTarget(Enum):
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        header: str = "difference:",
        bullet: str = "    - ",
        use_color: bool = False,
        max_entries: Optional[int] = None
    ):
        if max_entries is not None and max_entries < 0:
            raise ValueError(f"max_entries must be non-negative, got {max_entries}")
        self.header = header
        self.bullet = bullet
        self.use_color = use_color
        self.max_entries = max_entries

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            header=self.header,
            bullet=self.bullet,
            use_color=self.use_color,
            max_entries=self.max_entries
        )

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg

    def with_max_entries(self, max_entries: Optional[int]) -> 'FormatterConfig':
        if max_entries is not None and max_entries < 0:
            raise ValueError(f"max_entries must be non-negative, got {max_entries}")
        cfg = self.copy()
        cfg.max_entries = max_entries
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.yellow = '\033[33m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''
        self.yellow = ''

    def for_kind(self, kind: DiffKind) -> str:
        return {
            DiffKind.ADDED: self.green,
            DiffKind.REMOVED: self.red,
            DiffKind.CHANGED: self.yellow,
        }[kind]

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget, output: Optional[TextIO] = None):
        if target == OutputTarget.FILE and output is None:
            raise ValueError("A FILE target needs an output stream")
        self.target = target
        self._output = output
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def get_output(self) -> str:
        return "".join(self._buffer)


class BaseFormatter(ABC):
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None

    def format(self, entries: List[DiffEntry], output: Optional[TextIO] = None) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        self._format_impl(entries)
        if output is None:
            return self.writer.get_output()
        return ""

    @abstractmethod
    def _format_impl(self, entries: List[DiffEntry]):
        pass

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())
