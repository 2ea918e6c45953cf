import logging

from flask import Flask


def configure_logging(app: Flask) -> None:
    """Set the root and app log level from ``LOG_LEVEL``."""
    level_name = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
    )
    app.logger.setLevel(level)

    # Socket.IO packet logging is very chatty below WARNING
    logging.getLogger('engineio').setLevel(logging.WARNING)
    logging.getLogger('socketio').setLevel(logging.WARNING)
