"""
Export or import a full race-prep backup.

Usage:
    python scripts/manage_data.py export [--output PATH]
    python scripts/manage_data.py import PATH
"""

import argparse
import asyncio
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from raceprep.config import get_settings
from raceprep.database import get_db, init_db
from raceprep.errors import InvalidBackupError
from raceprep.logger import setup_logger
from raceprep.services import DataService


async def export_backup(output_path: str | None) -> str:
    async with get_db() as session:
        service = DataService(session)
        bundle = await service.export_all()

    output_path = output_path or service.backup_filename(bundle.exported_at)
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(bundle.model_dump_json(indent=2))

    print(f"Exported {len(bundle.races)} races and {len(bundle.tasks)} tasks to {output_path}")
    return output_path


async def import_backup(input_path: str) -> dict[str, int]:
    with open(input_path, encoding="utf-8") as f:
        bundle = DataService.load_backup(f.read())

    async with get_db() as session:
        counts = await DataService(session).import_data(bundle)

    print(f"Imported {counts} from {input_path}")
    return counts


async def main():
    parser = argparse.ArgumentParser(description="Export or import race-prep data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write a backup JSON file")
    export_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file path (default: race-prep-backup-YYYY-MM-DD.json)",
    )

    import_parser = subparsers.add_parser("import", help="Replace stored data from a backup")
    import_parser.add_argument("path", type=str, help="Backup JSON file")

    args = parser.parse_args()

    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    await init_db()

    if args.command == "export":
        await export_backup(args.output)
    else:
        try:
            await import_backup(args.path)
        except InvalidBackupError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
