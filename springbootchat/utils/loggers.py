import logging

_ROOT = "springbootchat"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name=_ROOT, level=logging.INFO):
    """
    Console logger. Every logger lives under the `springbootchat` root, which
    owns the single stream handler.
    """
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        root.setLevel(level)
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(ch)

    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
