"""Save directory composition for queued downloads."""

import os


def _with_final_separator(path: str) -> str:
    if path and not path.endswith(("/", os.sep)):
        return path + os.sep
    return path


def compose_save_dir(
    default_dir: str,
    meta_dir: str | None = None,
    ignore_meta: bool = False,
) -> str:
    """Compose the directory a download is saved into.

    A directory hint taken from the download's metadata (``meta_dir``) wins
    over ``default_dir`` unless ``ignore_meta`` is set or the hint is blank.
    Hints starting with ``.`` are subfolders of ``default_dir``. The result
    always ends with a path separator.

    Examples:
        >>> compose_save_dir("/downloads", "./docs")
        '/downloads/./docs/'
        >>> compose_save_dir("/downloads", "/srv/mirror")
        '/srv/mirror/'
        >>> compose_save_dir("/downloads", "/srv/mirror", ignore_meta=True)
        '/downloads/'
    """
    default_dir = _with_final_separator(default_dir)
    hint = meta_dir.strip() if isinstance(meta_dir, str) else ""
    if ignore_meta or not hint:
        return default_dir

    hint = _with_final_separator(hint)
    if hint.startswith("."):
        return default_dir + hint
    return hint
