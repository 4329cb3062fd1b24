import logging
import queue
from logging.handlers import QueueHandler, QueueListener

from creational.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s"


def init_log(level=None) -> QueueListener:
    """Send all root logging through a queue, so threads never block on console output.

    Existing root handlers are moved behind the listener. Call stop() on the returned listener to flush.
    """
    que = queue.Queue()
    root = logging.getLogger()

    handlers = root.handlers[:]
    for h in handlers:
        root.removeHandler(h)
    if not handlers:
        # no root handler yet
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers = [handler]

    root.addHandler(QueueHandler(que))
    root.setLevel(level or LOG_LEVEL)

    listener = QueueListener(que, *handlers, respect_handler_level=True)
    listener.start()
    return listener
