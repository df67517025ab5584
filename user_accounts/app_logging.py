import logging
from pythonjsonlogger import jsonlogger

_HANDLER_NAME = 'user_accounts_json'


def setup_logger(level: str = 'INFO') -> None:
    logger = logging.getLogger()
    logger.setLevel(str(level).upper())
    # create_app may run more than once in a process (tests, reloads).
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return
    logHandler = logging.StreamHandler()
    logHandler.set_name(_HANDLER_NAME)
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s',
                                         rename_fields={'levelname': 'level', 'asctime': 'timestamp'})
    logHandler.setFormatter(formatter)
    logger.addHandler(logHandler)
