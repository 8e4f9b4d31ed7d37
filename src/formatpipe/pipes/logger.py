import logging
from typing import Union


class LoggerPipe:
    """Forward formatted lines to a stdlib logger.

    Useful when an application already routes ``logging`` output and only
    wants this package's line layout.

    Args:
        logger: Logger instance or logger name.
        level: stdlib level every line is logged at (default: INFO).
    """

    def __init__(self, logger: Union[logging.Logger, str], level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self.level = level

    def handle(self, formatted_line: str) -> None:
        self.logger.log(self.level, formatted_line)
