# --- Directory scanning convenience -----------------------------------------
import logging
import os

from rmi_stubgen.indexer import JavaIndexer

logger = logging.getLogger(__name__)


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def index_file(indexer: JavaIndexer, path: str) -> bool:
    """Indexes one .java file; returns False if it could not be read."""
    try:
        src = read_text(path)
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return False
    indexer.index_source(src, path)
    return True


def index_directory(indexer: JavaIndexer, root_dir: str) -> int:
    """
    Recursively index all .java files in a directory, in a stable order.
    Returns the number of files indexed.
    """
    count = 0
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        for fn in sorted(filenames):
            if fn.endswith(".java") and index_file(indexer, os.path.join(dirpath, fn)):
                count += 1
    return count


def index_path(indexer: JavaIndexer, path: str) -> int:
    """A directory is scanned recursively; any other path is indexed as one file."""
    if os.path.isdir(path):
        return index_directory(indexer, path)
    return 1 if index_file(indexer, path) else 0
