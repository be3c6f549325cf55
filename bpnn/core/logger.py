import contextlib
import logging
import os
import time


DEFAULT_LOG_FILENAME = 'bpnn-log.txt'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        The log file, truncated on each run. None uses
        `DEFAULT_LOG_FILENAME` in the current directory.

    stdout: bool, default=True
        If True, log records are also written to the console.

    level: int, default=logging.INFO
        Level of the root logger.

    Returns
    -------
    root: logging.Logger
        The configured root logger.
    """
    filename = filename or os.path.join(os.path.curdir, DEFAULT_LOG_FILENAME)

    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    # Repeated calls (e.g., from tests) should not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fhandler = logging.FileHandler(filename, mode='w')
    fhandler.setFormatter(formatter)
    root.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        root.addHandler(shandler)

    return root


class TrainingLogger(object):
    """ Wraps a logger with progress and timing helpers used while
    iterating over examples
    """
    def __init__(self, logger):
        self.logger = logger

    def progress(self, msg, i, n):
        msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
        self.logger.info(msg % i)

    @contextlib.contextmanager
    def timed(self, label):
        """ Logs the wall time spent inside the `with` block
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.logger.info("{} took {:.3f} seconds".format(label, elapsed))
