"""
Environment variable controlled logger tree from root package.

"""
__all__ = ()

import logging
import os


ROOT_NAME = __package__.split(".", 1)[0]

LOG_LEVEL_ENV_VAR = f"{ROOT_NAME.upper()}_LOG_LEVEL"

root_logger = None


def get_logger(name: str):
    global root_logger

    if root_logger is None:
        root_logger = logging.getLogger(ROOT_NAME)
        # output is the application's to configure
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")))

    if name is None or name == "":
        name = ROOT_NAME
    elif not name.startswith(f"{ROOT_NAME}.") and name != ROOT_NAME:
        raise ValueError(f"Can NOT get logger [{name}] from root [{ROOT_NAME}]!")

    return logging.getLogger(name)


def resolve_level(log_level_name: str) -> int:
    log_level = getattr(logging, log_level_name.upper(), None)
    if not isinstance(log_level, int):
        logging.getLogger(ROOT_NAME).error(
            f"Failed setting log level to [{log_level_name}]"
        )
        return logging.INFO
    return log_level


root_logger = get_logger(None)
