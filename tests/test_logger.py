import logging

from barbershop_booking.logger import logger, setup_logging


def test_stdlib_records_reach_loguru():
    setup_logging(level="DEBUG", error_file="")
    messages = []
    sink_id = logger.add(messages.append, format="{level} {message}")
    try:
        logging.getLogger("uvicorn.error").warning("worker booted")
    finally:
        logger.remove(sink_id)

    assert any("WARNING worker booted" in str(m) for m in messages)
