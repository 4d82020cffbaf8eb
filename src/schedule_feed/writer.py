"""Writes today.json and week.json into the served output directory."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from schedule_feed.errors import FeedWriteError
from schedule_feed.logging import get_logger

log = get_logger(__name__)


def write_feed(
    today: dict[str, Any],
    week: dict[str, Any],
    output_dir: str | Path,
    today_name: str = "today.json",
    week_name: str = "week.json",
) -> tuple[Path, Path]:
    """Write both documents, or neither.

    Each document is written to a temporary file in `output_dir` first and
    only renamed into place once both have been serialized.

    Returns:
        (today_path, week_path)

    Raises:
        FeedWriteError: If the directory or either file cannot be written.
    """
    output_dir = Path(output_dir)
    targets = [(output_dir / today_name, today), (output_dir / week_name, week)]
    staged: list[tuple[str, Path]] = []

    # mkstemp creates 0600 files; the web server must be able to read them
    umask = os.umask(0)
    os.umask(umask)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for target, document in targets:
            fd, tmp_path = tempfile.mkstemp(
                dir=output_dir, prefix=f".{target.name}.", suffix=".tmp"
            )
            staged.append((tmp_path, target))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                os.fchmod(f.fileno(), 0o666 & ~umask)
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
        for tmp_path, target in staged:
            os.replace(tmp_path, target)
    except OSError as e:
        for tmp_path, _ in staged:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
        log.error("feed_write_failed", output_dir=str(output_dir), error=str(e))
        raise FeedWriteError(f"Could not write feed to {output_dir}: {e}") from e

    log.info("feed_written", today=str(targets[0][0]), week=str(targets[1][0]))
    return targets[0][0], targets[1][0]
