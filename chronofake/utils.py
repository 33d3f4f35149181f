"""
Output and logging helpers for the CLI
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Union
import pandas as pd
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Extension -> DataFrame writer; datetimes go out as ISO strings in JSON
WRITERS = {
    '.csv': lambda data, path, **kw: data.to_csv(path, index=False, **kw),
    '.json': lambda data, path, **kw: data.to_json(path, orient='records', date_format='iso', **kw),
    '.parquet': lambda data, path, **kw: data.to_parquet(path, **kw),
}


def write_data(data: pd.DataFrame, filepath: Union[str, Path], **kwargs):
    """
    Write generated columns, choosing the format from the file extension

    Args:
        data: DataFrame to write
        filepath: Output path; missing parent directories are created
        **kwargs: Passed through to the pandas writer
    """
    filepath = Path(filepath)
    writer = WRITERS.get(filepath.suffix.lower())
    if writer is None:
        raise ValueError(f"Unsupported file format: {filepath.suffix or '(none)'}")

    filepath.parent.mkdir(parents=True, exist_ok=True)
    writer(data, filepath, **kwargs)
    logger.info(f"Wrote {len(data)} rows to {filepath}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    name: str = "chronofake",
) -> logging.Logger:
    """Send the package's log records to stderr and, optionally, a rotating file"""
    root = logging.getLogger(name)
    root.setLevel(level)
    root.handlers.clear()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
