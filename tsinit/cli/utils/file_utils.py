"""Atomic file operations utilities."""

import tempfile
from pathlib import Path
from typing import Union


def atomic_write_text(filepath: Union[str, Path], content: str) -> None:
    """
    Write text content to a file atomically.

    The content goes to a temporary file in the target directory first and
    is then renamed over the target, so readers never see a partial file.

    Args:
        filepath: Target file path
        content: Text content to write
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode='w',
        dir=filepath.parent,
        prefix=f".{filepath.name}.",
        suffix='.tmp',
        delete=False,
        encoding='utf-8'
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(content)
            tmp_file.flush()
            tmp_file.close()

            tmp_path.replace(filepath)
        except Exception:
            try:
                tmp_path.unlink()
            except OSError:
                pass
            raise
