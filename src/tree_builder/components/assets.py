import logging
import re
from pathlib import Path

from tree_builder.errors import AssetWriteError

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:\x00]")


def portrait_path(images_dir: str, name: str, key: str = "") -> Path:
    """Return where the portrait of *name* is stored.

    The directory *key* is appended so namesakes get separate files.
    """
    stem = f"{name}-{key}" if key else name
    return Path(images_dir) / f"tmp-{_UNSAFE_FILENAME_CHARS.sub('_', stem)}.jpg"


def save_portrait(payload: bytes, name: str, images_dir: str, key: str = "") -> str:
    """Write a portrait payload to disk and return the path to embed in labels.

    Raises:
        AssetWriteError: If the directory or the file cannot be written.
    """
    path = portrait_path(images_dir, name, key)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise AssetWriteError(f"cannot write portrait for {name} to {path}: {exc}") from exc
    logger.debug("Saved portrait for %s to %s", name, path)
    return path.as_posix()
