"""Command line entry point for the translation synchronization run."""

import argparse
import asyncio
import sys
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from infrastructure.configuration import settings
from infrastructure.logging import bind_run_context, get_module_logger
from modules.translations import (
    JSONTranslationLoader,
    LanguageDirectory,
    SyncOptions,
    SyncOrchestrator,
)
from modules.translations.domain import ConfigurationError, FileType, SyncError
from modules.translations.domain.models import SyncReport
from modules.translations.matchers import (
    InterpolationMatcher,
    build_matcher_registry,
    get_matcher,
)
from modules.translations.providers import build_provider_registry, create_provider

logger = get_module_logger()

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from settings.sync."""
    defaults = settings.sync
    parser = argparse.ArgumentParser(
        prog="json-translation-sync",
        description="Translate the JSON files of every language directory "
        "from a source language.",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=defaults.input_dir,
        help="directory containing one subdirectory per language",
    )
    parser.add_argument(
        "-l",
        "--source-language",
        default=defaults.source_language,
        help="language directory used as template",
    )
    parser.add_argument(
        "-t",
        "--type",
        default=defaults.file_type,
        choices=[t.value for t in FileType],
        help="structure of the translation files",
    )
    parser.add_argument(
        "-s",
        "--service",
        default=defaults.service,
        help="translation service to use",
    )
    parser.add_argument(
        "--list-services",
        action="store_true",
        help="list the available translation services and exit",
    )
    parser.add_argument(
        "-m",
        "--matcher",
        default=defaults.matcher,
        help="interpolation matcher protecting placeholders",
    )
    parser.add_argument(
        "--list-matchers",
        action="store_true",
        help="list the available interpolation matchers and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="service specific configuration, such as an API key",
    )
    parser.add_argument(
        "-f",
        "--fix-inconsistencies",
        action="store_true",
        default=defaults.fix_inconsistencies,
        help="reset values of natural source files to their keys",
    )
    parser.add_argument(
        "-d",
        "--delete-unused-strings",
        action="store_true",
        default=defaults.delete_unused_strings,
        help="remove strings and files that no longer exist in the source",
    )
    return parser


async def run_sync(
    args: argparse.Namespace,
    providers: Mapping,
    matchers: Mapping[str, InterpolationMatcher],
) -> SyncReport:
    """Build the collaborators from parsed arguments and run one sync.

    Raises:
        SyncError: If the run cannot be configured or fails.
    """
    provider = create_provider(providers, args.service)
    matcher = get_matcher(matchers, args.matcher)

    try:
        directory = LanguageDirectory(args.input)
    except FileNotFoundError as e:
        raise ConfigurationError(str(e), cause=e) from e

    provider.initialize(args.config, matcher)

    loader = JSONTranslationLoader(directory, FileType.from_string(args.type))
    options = SyncOptions(
        source_language=args.source_language,
        delete_unused_strings=args.delete_unused_strings,
        fix_inconsistencies=args.fix_inconsistencies,
    )
    orchestrator = SyncOrchestrator(directory, loader, provider, options)

    with bind_run_context(source_language=args.source_language, service=args.service):
        logger.info(
            "sync_started",
            input=str(directory.root),
            matcher=matcher.name,
            file_type=args.type,
        )
        return await orchestrator.run()


def log_report(report: SyncReport) -> None:
    for language in report.languages:
        if language.skipped:
            continue
        logger.info(
            "language_summary",
            language=language.language,
            changes=f"+{language.added}/-{language.removed}",
        )
    if report.dry_run:
        logger.info("dry_run_finished", files_written=0)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    providers = build_provider_registry()
    matchers = build_matcher_registry()

    if args.list_services:
        print("\n".join(providers))
        return 0
    if args.list_matchers:
        print("\n".join(matchers))
        return 0

    try:
        report = asyncio.run(run_sync(args, providers, matchers))
    except SyncError as e:
        logger.error("sync_failed", error=e.message, cause=repr(e.cause))
        return 1
    except ValueError as e:
        logger.error("sync_failed", error=str(e))
        return 1

    log_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
