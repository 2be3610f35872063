"""
Result recorder: persist the seed record as JSON for other scripts.
"""

from pathlib import Path
from typing import Union

from content_seeder.logging_config import get_logger
from content_seeder.schemas.record import SeedRecord

logger = get_logger(__name__)


def save_record(record: SeedRecord, path: Union[str, Path]) -> Path:
    """Write the record with camelCase keys and 2-space indentation."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(record.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    logger.info("Seed record written to %s", out)
    return out


def load_record(path: Union[str, Path]) -> SeedRecord:
    """Read a record written by save_record (or by an earlier seed run)."""
    return SeedRecord.model_validate_json(Path(path).read_text(encoding="utf-8"))
