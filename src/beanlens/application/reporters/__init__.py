"""Reporters for bean analysis results.

PlainTextReporter and JSONReporter use the stdlib only;
ConsoleReporter renders rich tables.
"""

from beanlens.application.reporters._base import BaseReporter
from beanlens.application.reporters.console import ConsoleConfig, ConsoleReporter
from beanlens.application.reporters.json_reporter import JSONReporter
from beanlens.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
