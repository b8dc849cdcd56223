"""Command line interface for metricconv.

Usage::

    metricconv validate src/metricconv/conventions/v1.32.0
    metricconv list src/metricconv/conventions/v1.32.0 --namespace http
    metricconv generate src/metricconv/conventions/v1.32.0 --output src/metricconv/semconv/v1_32_0
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from metricconv import MetricConvError, __version__
from metricconv.config import MetricConvConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metricconv",
        description="Validate semantic convention definitions and generate typed metric instruments.",
    )
    parser.add_argument("--version", action="version", version=f"metricconv {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Load and validate a convention model")
    validate.add_argument("path", type=Path, help="YAML file or directory of YAML files")
    validate.add_argument("--conventions-version", dest="conv_version", help="Convention version, e.g. v1.32.0")

    list_ = sub.add_parser("list", help="List the metrics of a convention model")
    list_.add_argument("path", type=Path, help="YAML file or directory of YAML files")
    list_.add_argument("--conventions-version", dest="conv_version", help="Convention version, e.g. v1.32.0")
    list_.add_argument("--namespace", help="Only list metrics in this namespace")

    generate = sub.add_parser("generate", help="Generate instrument modules")
    generate.add_argument("path", type=Path, help="YAML file or directory of YAML files")
    generate.add_argument("--conventions-version", dest="conv_version", help="Convention version, e.g. v1.32.0")
    generate.add_argument("--output", "-o", type=Path, required=True, help="Package directory to write")
    generate.add_argument(
        "--namespace",
        action="append",
        dest="namespaces",
        help="Namespace to generate (repeatable). Defaults to all namespaces.",
    )
    return parser


def _cmd_validate(args: argparse.Namespace, config: MetricConvConfig) -> None:
    from metricconv.schema import build_conventions, load_model

    groups, model_hash = load_model(args.path)
    conventions = build_conventions(groups, _resolve_version(args, config))
    print(
        f"{args.path}: {len(groups)} groups, {len(conventions.attributes)} attributes, "
        f"{len(conventions.metrics)} metrics ({conventions.version}, sha256 {model_hash})"
    )


def _cmd_list(args: argparse.Namespace, config: MetricConvConfig) -> None:
    from metricconv.schema import load_conventions

    conventions = load_conventions(args.path, _resolve_version(args, config))
    for ns, metrics in conventions.namespaces().items():
        if args.namespace and ns != args.namespace:
            continue
        for m in metrics:
            print(f"{m.metric_name}\t{m.kind.value}\t{m.unit}")


def _cmd_generate(args: argparse.Namespace, config: MetricConvConfig) -> None:
    from metricconv.codegen import generate
    from metricconv.schema import load_conventions
    from metricconv.telemetry import start_span

    conventions = load_conventions(args.path, _resolve_version(args, config))
    with start_span(
        "metricconv.generate",
        attributes={"metricconv.conventions.version": conventions.version},
        config=config,
    ) as span:
        written = generate(conventions, args.output, args.namespaces)
        span.set_attribute("metricconv.files_written", len(written))
    for path in written:
        print(path)


def _resolve_version(args: argparse.Namespace, config: MetricConvConfig) -> str:
    """Pick the convention version: flag, then path name, then config.

    For a file path the parent directory name is tried after the file name.
    """
    from metricconv import SchemaError
    from metricconv.schema import infer_version

    inferred = infer_version(args.path.name)
    if inferred is None and args.path.is_file():
        inferred = infer_version(args.path.parent.name)
    raw = args.conv_version or inferred or config.conventions_version
    version = infer_version(raw)
    if version is None:
        raise SchemaError(f"Invalid convention version '{raw}' (expected vX.Y.Z)")
    return version


_COMMANDS = {
    "validate": _cmd_validate,
    "list": _cmd_list,
    "generate": _cmd_generate,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    config = MetricConvConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = _build_parser().parse_args(argv)
    try:
        _COMMANDS[args.command](args, config)
    except (MetricConvError, FileNotFoundError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
