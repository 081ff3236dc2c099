"""
Schema bootstrap script
Usage: python init_db.py [database_url]
"""
import logging
import sys

from tzscheduler.database import build_engine, engine, init_db

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def main(argv: list[str]) -> int:
    target = build_engine(argv[1]) if len(argv) > 1 else engine
    logger.info(f"Creating tables on {target.url.render_as_string(hide_password=True)}")
    init_db(bind=target)
    logger.info("✅ Schema bootstrap completed successfully!")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main(sys.argv))
    except Exception as e:
        logger.error(f"❌ Schema bootstrap failed: {e}")
        sys.exit(1)
