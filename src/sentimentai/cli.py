# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import Sequence

from .config import ServingConfig, TrainingConfig, parse_delimiter
from .console import MLConsole, configure_logging
from .exceptions import SentimentAIError


def _add_dataset_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--delimiter", help="Field delimiter (default: tab; aliases: tab, comma, pipe, semicolon, space)")
    parser.add_argument(
        "--text-first",
        action="store_true",
        default=None,
        help="Records are laid out text<delim>label instead of label<delim>text",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sentimentai", description="Train and serve a binary sentiment classifier.")
    parser.add_argument("--quiet", action="store_true", help="Disable console output")
    sub = parser.add_subparsers(dest="command", required=True)

    train = sub.add_parser("train", help="Train, evaluate and save a model")
    train.add_argument("--data", type=Path, help="Labeled dataset file")
    train.add_argument("--model", type=Path, help="Output path of the model artifact")
    train.add_argument("--no-save", action="store_true", help="Skip writing the model artifact")
    train.add_argument("--test-fraction", type=float, help="Share of records held out for evaluation")
    train.add_argument("--seed", type=int, help="Random seed of the train/test split")
    _add_dataset_args(train)

    evaluate = sub.add_parser("evaluate", help="Score a saved model against a labeled dataset")
    evaluate.add_argument("--model", type=Path, help="Model artifact to evaluate")
    evaluate.add_argument("--data", type=Path, help="Labeled dataset file")
    _add_dataset_args(evaluate)

    serve = sub.add_parser("serve", help="Serve the model over HTTP")
    serve.add_argument("--model", type=Path, help="Model artifact to serve")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)
    serve.add_argument("--pool-size", type=int, help="Number of prediction engines")
    return parser.parse_args(argv)


def _training_config(args: argparse.Namespace) -> TrainingConfig:
    config = TrainingConfig.from_env()
    overrides: dict[str, object] = {}
    if args.data is not None:
        overrides["data_path"] = args.data
    if args.model is not None:
        overrides["model_path"] = args.model
    if getattr(args, "no_save", False):
        overrides["model_path"] = None
    if getattr(args, "test_fraction", None) is not None:
        overrides["test_fraction"] = args.test_fraction
    if getattr(args, "seed", None) is not None:
        overrides["seed"] = args.seed
    if args.delimiter is not None:
        overrides["delimiter"] = parse_delimiter(args.delimiter)
    if args.text_first:
        overrides["label_first"] = False
    return dataclasses.replace(config, **overrides)


def _serving_config(args: argparse.Namespace) -> ServingConfig:
    config = ServingConfig.from_env()
    overrides: dict[str, object] = {}
    if args.model is not None:
        overrides["model_path"] = args.model
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.pool_size is not None:
        overrides["pool_size"] = max(args.pool_size, 1)
    return dataclasses.replace(config, **overrides)


def _train(args: argparse.Namespace, console: MLConsole) -> int:
    from .training.trainer import run_training

    console.banner()
    run_training(_training_config(args), console=console)
    return 0


def _evaluate(args: argparse.Namespace, console: MLConsole) -> int:
    from .training.trainer import evaluate_saved_model

    config = _training_config(args)
    if config.model_path is None:
        raise SentimentAIError("No model artifact to evaluate")
    metrics = evaluate_saved_model(
        model_path=config.model_path,
        dataset_path=config.data_path,
        delimiter=config.delimiter,
        label_first=config.label_first,
    )
    console.metrics_table(metrics.as_dict(), title=f"Evaluation of {config.model_path}")
    return 0


def _serve(args: argparse.Namespace, console: MLConsole) -> int:
    import uvicorn

    from .api.app import create_app

    config = _serving_config(args)
    console.info(f"Serving {config.model_path} on http://{config.host}:{config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_config=None)
    return 0


COMMANDS = {"train": _train, "evaluate": _evaluate, "serve": _serve}


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()
    console = MLConsole(enabled=not args.quiet)
    try:
        return COMMANDS[args.command](args, console)
    except SentimentAIError as exc:
        console.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
