"""mdgallery — index gallery embeds in a markdown vault and search them."""

import asyncio
import logging
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import replace
from itertools import islice

from mdgallery.aggregator import build_index
from mdgallery.config import Config, ConfigError, load_config, load_yaml_config
from mdgallery.formatter import format_suggestions_json, format_suggestions_text, get_formatter
from mdgallery.models import FieldQuery, LogicMode, QueryFilter, SourcePolicy
from mdgallery.parser import parse_gallery_names
from mdgallery.query import filter_index
from mdgallery.store import StoreError, VaultStore
from mdgallery.suggestions import collect_suggestions

logger = logging.getLogger(__name__)

MODE_CHOICES = ["disable", "disabled", "or", "and", "not"]


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="mdgallery",
        description="Index gallery embeds in markdown notes and search them.",
    )
    parser.add_argument(
        "vault",
        nargs="?",
        help="Vault directory (default: vault_dir from config)",
    )

    sources = parser.add_mutually_exclusive_group()
    sources.add_argument(
        "--names",
        nargs="+",
        help="Explicit gallery note names (without extension)",
    )
    sources.add_argument(
        "--block",
        help="File holding a gallery definition block of [[Note]] links",
    )
    sources.add_argument(
        "--tag",
        nargs="+",
        help="Marker string(s) identifying gallery notes (default: from config)",
    )

    for field_name, help_text in (
        ("filename", "embedded file name"),
        ("gallery", "gallery (source note) name"),
        ("property", "embed property"),
    ):
        parser.add_argument(
            f"--{field_name}",
            nargs="+",
            default=[],
            metavar="TERM",
            help=f"Search terms for the {help_text} (case-insensitive substring)",
        )
        parser.add_argument(
            f"--{field_name}-mode",
            choices=MODE_CHOICES,
            help="Logic mode (default: or when terms are given, else disabled)",
        )

    parser.add_argument(
        "--existing-only",
        action="store_true",
        help="Drop entries whose embedded file does not exist in the vault",
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Print autocomplete options instead of entries",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--lines",
        type=int,
        help="Limit output to N entries",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: INFO, or from config)",
    )
    return parser


def build_field_query(terms: list[str], mode: str | None) -> FieldQuery:
    if mode is not None:
        return FieldQuery(mode=LogicMode.parse(mode), terms=tuple(terms))
    if terms:
        return FieldQuery(mode=LogicMode.OR, terms=tuple(terms))
    return FieldQuery()


def build_query_filter(args: Namespace) -> QueryFilter:
    return QueryFilter(
        identifier=build_field_query(args.filename, args.filename_mode),
        source=build_field_query(args.gallery, args.gallery_mode),
        property=build_field_query(args.property, args.property_mode),
    )


def resolve_sources(args: Namespace, config: Config) -> tuple[SourcePolicy, list[str]]:
    """Pick the selection policy and its source data from the arguments."""
    if args.names:
        return SourcePolicy.EXPLICIT, list(args.names)
    if args.block:
        try:
            with open(args.block, "r", encoding="utf-8") as f:
                names = parse_gallery_names(f.read())
        except OSError as e:
            raise ConfigError(f"Cannot read gallery block {args.block}: {e}") from e
        return SourcePolicy.EXPLICIT, names
    return SourcePolicy.VIRTUAL, list(args.tag or config.marker_tags)


def build_config(args: Namespace) -> Config:
    config = load_config(load_yaml_config(args.config))
    overrides = {}
    if args.vault:
        overrides["vault_dir"] = args.vault
    if args.output:
        overrides["output_format"] = args.output
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = replace(config, **overrides)
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ConfigError(f"Unknown log level: {config.log_level}")
    return config


async def run(args: Namespace, config: Config) -> None:
    """Build the index, apply the query, and print results."""
    store = VaultStore(config.vault_dir, config.document_extension)

    if args.suggest:
        suggestions = await collect_suggestions(store, args.tag or config.marker_tags)
        if config.output_format == "json":
            print(format_suggestions_json(suggestions))
        else:
            print(format_suggestions_text(suggestions))
        return

    policy, source_data = resolve_sources(args, config)
    full_index = await build_index(store, policy, source_data)
    results = filter_index(full_index, build_query_filter(args))
    logger.info("%d of %d entries matched", len(results), len(full_index))

    entries = iter(results.values())
    if args.existing_only:
        existing = store.file_names()
        entries = (e for e in entries if e.item_id in existing)
    if args.lines is not None:
        entries = islice(entries, args.lines)

    formatter = get_formatter(config.output_format)
    for entry in entries:
        print(formatter(entry))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.lines is not None and args.lines < 0:
        parser.error("--lines must be zero or greater")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [mdgallery] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logging.getLogger().setLevel(config.log_level.upper())

    try:
        asyncio.run(run(args, config))
    except (StoreError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
