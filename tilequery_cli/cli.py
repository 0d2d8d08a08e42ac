"""
tilequery CLI - Main entry point.

Parses a within expression from a JSON/YAML file and checks tile features
against it.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from tilequery_geometry import CanonicalTileID, GeometryTileFeature
from tilequery_expression import (
    EvaluationContext,
    LogEvent,
    LoggerDiagnostics,
    ParsingContext,
    QueryConfig,
    Within,
    create_logger,
)


def load_document(path: str) -> Any:
    """
    Load a JSON or YAML document.

    ".json" files are read with the json module (YAML 1.1 reads numbers
    such as 1e-05 as strings); anything else with yaml.safe_load.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content is not valid YAML/JSON
    """
    doc_path = Path(path)

    if not doc_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if doc_path.suffix.lower() == ".json":
        try:
            with open(doc_path) as f:
                return json.load(f)
        except (ValueError, RecursionError) as e:
            raise ValueError(f"Invalid JSON in {path}: {e}")

    try:
        with open(doc_path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML/JSON in {path}: {e}")


def load_features(path: str) -> List[GeometryTileFeature]:
    """Load a list of feature dicts (see GeometryTileFeature.from_dict)."""
    data = load_document(path)
    if isinstance(data, dict):
        data = data.get("features", [])
    if not isinstance(data, list):
        raise ValueError(f"Features file must contain a list, got {type(data).__name__}")
    return [GeometryTileFeature.from_dict(item) for item in data]


def parse_expression(value: Any, config: QueryConfig) -> Within:
    """
    Parse a within expression, raising ValueError with every parse error.
    """
    logger = create_logger("cli", level=config.level)
    diagnostics = LoggerDiagnostics(create_logger(config.component, level=config.level))

    ctx = ParsingContext(diagnostics=diagnostics)
    node = Within.parse(value, ctx)
    if node is None:
        messages = [error.message for error in ctx.errors]
        logger.error(
            event=LogEvent.EXPRESSION_PARSE_FAILED,
            message="Failed to parse within expression",
            metadata={'errors': messages},
        )
        raise ValueError("; ".join(messages))

    logger.debug(
        event=LogEvent.EXPRESSION_PARSED,
        message="Parsed within expression",
        metadata={'rings': len(node.geometry.rings)},
    )
    return node


def check(
    expression_path: str,
    features_path: str,
    config: QueryConfig,
    tile: Optional[str] = None
) -> str:
    """
    Evaluate every feature against the expression.

    Returns:
        Output text ("<id>\\t<true|false>" lines, or a JSON list)
    """
    tile_id = CanonicalTileID.from_string(tile) if tile else config.get_default_tile()
    if tile_id is None:
        raise ValueError("A tile id is required (--tile or default_tile in config)")

    node = parse_expression(load_document(expression_path), config)
    features = load_features(features_path)

    results = [
        node.evaluate(EvaluationContext(feature=feature, canonical=tile_id))
        for feature in features
    ]

    create_logger("cli", level=config.level).info(
        event=LogEvent.WITHIN_EVALUATED,
        message=f"Evaluated {len(features)} features",
        metadata={
            'tile': str(tile_id),
            'inside': sum(results),
        },
    )

    ids = [feature.id if feature.id is not None else index for index, feature in enumerate(features)]
    if config.output_format == "json":
        return json.dumps([{'id': i, 'within': r} for i, r in zip(ids, results)])
    return "\n".join(f"{i}\t{'true' if r else 'false'}" for i, r in zip(ids, results))


def serialize(expression_path: str, config: QueryConfig) -> str:
    """Parse the expression and return its serialized form as JSON."""
    node = parse_expression(load_document(expression_path), config)
    serialized = node.serialize()

    create_logger("cli", level=config.level).debug(
        event=LogEvent.EXPRESSION_SERIALIZED,
        message="Serialized within expression",
    )
    return json.dumps(serialized)


def load_config(path: Optional[str]) -> QueryConfig:
    if path is None:
        return QueryConfig()
    try:
        config = QueryConfig.from_yaml(Path(path))
    except ValueError as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid configuration",
            metadata={'path': path},
            exc_info=e,
        )
        raise
    create_logger("cli", level=config.level).debug(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded configuration",
        metadata={'path': path},
    )
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="tilequery CLI - Evaluate 'within' expressions against tile features",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check point features of tile 3/4/2 against a polygon
  tilequery-cli check expression.json features.yaml --tile 3/4/2

  # Print the serialized form of an expression
  tilequery-cli serialize expression.json
"""
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (log level, default tile, output format)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    check_cmd = subparsers.add_parser('check', help='Evaluate features against an expression')
    check_cmd.add_argument('expression', help='Path to expression JSON/YAML')
    check_cmd.add_argument('features', help='Path to features JSON/YAML')
    check_cmd.add_argument('--tile', default=None, help='Tile id as z/x/y')

    serialize_cmd = subparsers.add_parser('serialize', help='Print serialized expression')
    serialize_cmd.add_argument('expression', help='Path to expression JSON/YAML')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)

        if args.command == 'check':
            output = check(args.expression, args.features, config, tile=args.tile)
        else:
            output = serialize(args.expression, config)

    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
