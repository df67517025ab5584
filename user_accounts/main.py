"""Runs the accounts service.

``uvicorn --factory user_accounts.factory:create_app`` serves the same
application under an external server command.
"""

import uvicorn

from . import config
from .factory import create_app


def run() -> None:
    """Serve the application on ``HOST``:``PORT``."""
    app = create_app()
    uvicorn.run(app, host=config.HOST, port=config.PORT,
                log_config=None)


if __name__ == '__main__':
    run()
