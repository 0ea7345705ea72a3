#!/usr/bin/env python3
"""
Entrypoint for catswipe. Loads one batch of cats into a swipe deck and logs it.
"""
import asyncio
import logging
import colorlog  # For colorful logs

from catswipe.config import config
from catswipe.deck import SwipeDeck
from catswipe.service import CatService


def setup_logging(level: str = "INFO"):
    # Configure root logger with colorized output
    root = logging.getLogger()
    root.handlers.clear()
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))

logger = logging.getLogger("catswipe.main")


async def run():
    async with CatService.from_config(config) as service:
        deck = SwipeDeck(service, batch_size=config.batch_size)
        added = await deck.load_more()
        logger.info(f"Deck loaded with {added} cats.")
        for cat in deck.cats:
            logger.info(f"  {cat.id}: {cat.display_breed} - {cat.display_description} ({cat.image_url})")
        liked = await service.get_liked_cats()
        logger.info(f"{len(liked)} cats in your collection ({service.store.path}).")


def main():
    setup_logging(config.log_level)
    logger.info(f"Starting catswipe with {config!r}")
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Interrupted by user (KeyboardInterrupt). Exiting.")
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
    finally:
        logger.info("catswipe shutting down.")


if __name__ == "__main__":
    main()
