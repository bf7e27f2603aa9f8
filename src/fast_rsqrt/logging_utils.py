import logging
from pathlib import Path


class OncePerCallSiteFilter(logging.Filter):
    """Keep the first record from each source line, drop repeats."""

    def __init__(self):
        super().__init__()
        self.seen_call_sites = set()

    def filter(self, record):
        key = (record.pathname, record.lineno)
        if key in self.seen_call_sites:
            return False
        self.seen_call_sites.add(key)
        return True


def setup_fast_rsqrt_logging(path=None, record=True, once=False):
    if not record:
        return

    logger = logging.getLogger("fast_rsqrt")
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return

    filename = Path(path or Path.home() / ".fast_rsqrt/oplist.log")
    filename.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(filename, mode="w")

    if once:
        handler.addFilter(OncePerCallSiteFilter())

    formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)

    logger.propagate = False


def teardown_fast_rsqrt_logging():
    logger = logging.getLogger("fast_rsqrt")
    for handler in logger.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
