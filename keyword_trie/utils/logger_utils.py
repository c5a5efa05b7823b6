# logger_utils.py - application log: messages, metrics and block timings

import os
import time
from datetime import datetime

# Directory where log files go by default
LOG_DIR = "logs"

# Path to the default log file, can be overridden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "keyword_trie.log")


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """Lightweight logger writing to a file and echoing to the console."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    @staticmethod
    def metric(tag, value, unit="", path=None, echo=True):
        """
        Record a metric (timing, counts, sizes).
        Appends it to the log file and prints it unless echo is off.
        Example: [12:45:02] load keys: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if echo:
            print(line)
        _append(path or DEFAULT_LOG_PATH, line)

    @staticmethod
    def time_block(label, path=None, echo=True):
        """
        Measure how long a block takes and record it as a metric.
            with Log.time_block("load keys"):
                trie.update(keys)
        """
        return _Timer(label, path, echo)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, label, path=None, echo=True):
        self.label = label
        self.path = path
        self.echo = echo
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s", path=self.path, echo=self.echo)
