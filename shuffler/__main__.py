"""Main entry point for the shuffler package."""

from loguru import logger

from shuffler.cli import create_parser
from shuffler.core import load_config
from shuffler.processing import run_pipeline
from shuffler.utils import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Validate before loading so the user gets a usage message
    if not args.config and not args.words and not args.include:
        parser.error("Must specify words, --include, or --config")

    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("Shuffler - Leetspeak Variant Generator")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        if config.words:
            logger.info(f"  Words: {len(config.words)}")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        if config.dictionary:
            logger.info(f"  Dictionary file: {config.dictionary}")
        if config.substitutions:
            logger.info(f"  Inline substitutions: {len(config.substitutions)}")
        logger.info(f"  Output: {config.output or 'stdout'}")
        logger.info(f"  Mode: {'parallel' if config.parallel else 'sequential'}")
        if config.parallel and config.jobs:
            logger.info(f"  Max workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
