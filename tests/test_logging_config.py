import logging

from squaregrid.__main__ import parse_args
from squaregrid.logging_config import setup_logging


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "grid.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert logger.name == "squaregrid"
    assert len(logger.handlers) == 2
    logging.getLogger("squaregrid.widget").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "squaregrid.widget - DEBUG - hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_cli_arguments():
    args = parse_args(["--rows", "4", "--columns", "6", "--cell-size", "12", "--web"])
    assert (args.rows, args.columns, args.cell_size, args.web) == (4, 6, 12, True)
    assert parse_args([]).cell_size == 20
