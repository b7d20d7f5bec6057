"""Main entry point for the typofix package."""

import sys

from loguru import logger

from typofix.cli import create_parser
from typofix.core import Config, TypoFixError, load_config
from typofix.processing import run_pipeline
from typofix.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("TypoFix - Spelling Corrector")
        logger.info("=" * 60)
        logger.info("")


def _validate_config(config: Config, parser) -> None:
    """Validate configuration settings."""
    if config.debug_words and not config.debug:
        parser.error("--debug-words requires the --debug flag")

    if config.jobs > 1 and not config.lines:
        logger.warning("--jobs only has an effect in --lines mode")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        if config.dictionary:
            logger.info(f"  Dictionary file: {config.dictionary}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.english_words:
            logger.info("  english-words dictionary: enabled")
        logger.info(f"  Max edit distance: {config.max_edit_distance}")
        logger.info(f"  Max candidates: {config.max_candidates}")
        logger.info(f"  Node storage: {config.node_storage}")
        if config.lines:
            logger.info(f"  Line mode, workers: {config.jobs}")
        logger.info("")


def _run_pipeline_with_error_handling(config: Config) -> int:
    """Run pipeline with proper error handling.

    Returns:
        Process exit status
    """
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
        return 0
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except (TypoFixError, OSError) as e:
        logger.error(f"✗ Processing failed: {e}")
        return 1


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except TypoFixError as e:
        setup_logger()
        logger.error(str(e))
        return 1

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _validate_config(config, parser)
    _print_config_summary(config)

    return _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    sys.exit(main())
