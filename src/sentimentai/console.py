# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .schemas import SentimentPrediction, sentiment_label

ASCII_BANNER = r"""
 ___          _   _                   _        _   ___
/ __| ___ _ _| |_(_)_ __  ___ _ _  | |_     /_\ |_ _|
\__ \/ -_) ' \  _| | '  \/ -_) ' \ |  _|   / _ \ | |
|___/\___|_||_\__|_|_|_|_\___|_||_| \__|  /_/ \_\___|
"""


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True, quiet=not self.enabled)

    def banner(self) -> None:
        self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Sentiment ML", border_style="cyan"))

    def info(self, text: str) -> None:
        self._console.print(f"[bold cyan]INFO[/bold cyan] {text}")

    def warn(self, text: str) -> None:
        self._console.print(f"[bold yellow]WARN[/bold yellow] {text}")

    def error(self, text: str) -> None:
        self._console.print(f"[bold red]ERROR[/bold red] {text}")

    def success(self, text: str) -> None:
        self._console.print(f"[bold green]OK[/bold green] {text}")

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        table = Table(title=title, show_lines=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for key in sorted(metrics.keys()):
            table.add_row(key, f"{float(metrics[key]):.2%}")
        self._console.print(table)

    def predictions_table(self, predictions: Iterable[SentimentPrediction], *, title: str) -> None:
        table = Table(title=title, show_lines=True)
        table.add_column("Sentiment", style="bold")
        table.add_column("Prediction")
        table.add_column("Probability", justify="right")
        for item in predictions:
            style = "green" if item.predicted_label else "red"
            table.add_row(
                item.text,
                f"[{style}]{sentiment_label(item.predicted_label)}[/{style}]",
                f"{float(item.probability):.4f}",
            )
        self._console.print(table)
