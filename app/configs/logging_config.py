import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout (called once from the app lifespan)"""
    # basicConfig is a no-op when the root logger already has handlers, e.g. under pytest or uvicorn --reload
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
