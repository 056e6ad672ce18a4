import logging

from app.config import load_settings
from app.db.engine import build_engine
from app.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = build_engine(load_settings())
    metadata.drop_all(engine)
    metadata.create_all(engine)
    engine.dispose()
    logger.info("DB schema created.")


if __name__ == "__main__":
    main()
