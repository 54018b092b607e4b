"""Command-line entry point for quoting booking drafts."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from src.config import configure_logging, get_logger, settings
from src.exceptions import QuotationError
from src.models.draft.booking import BookingDraft
from src.services import CatalogIndex, DraftStore, QuotationService

logger = get_logger(__name__)


def _read_json(path: str) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise QuotationError(f"Cannot read {path}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel package quotation engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    quote = subparsers.add_parser("quote", help="Price a booking draft")
    quote.add_argument(
        "--catalog",
        required=True,
        help='Path to catalog JSON ({"hotels": [...], "tours": [...]})',
    )
    source = quote.add_mutually_exclusive_group(required=True)
    source.add_argument("--draft", help="Path to booking draft JSON")
    source.add_argument("--draft-id", help="Id of a draft saved in the draft store")

    save = subparsers.add_parser("save-draft", help="Save a booking draft for later")
    save.add_argument("--draft", required=True, help="Path to booking draft JSON")

    subparsers.add_parser("list-drafts", help="List saved draft ids")

    for subparser in subparsers.choices.values():
        subparser.add_argument(
            "--drafts-dir",
            type=Path,
            default=None,
            help=f"Draft store directory (default: {settings.storage.drafts_dir})",
        )
    return parser


def run(argv: Optional[list[str]] = None) -> int:
    """Run a command and print its JSON result.

    Returns:
        Exit code (0 on success, 1 on failure)
    """
    args = build_parser().parse_args(argv)
    store = DraftStore(args.drafts_dir)

    try:
        if args.command == "quote":
            catalog = CatalogIndex.from_dict(_read_json(args.catalog))
            if args.draft:
                draft = BookingDraft(**_read_json(args.draft))
            else:
                draft = store.load(args.draft_id)
            breakdown = QuotationService(catalog).quote(draft)
            print(json.dumps(breakdown.to_dict(), indent=2))
        elif args.command == "save-draft":
            draft_id = store.save(BookingDraft(**_read_json(args.draft)))
            print(json.dumps({"draftId": draft_id}))
        elif args.command == "list-drafts":
            print(json.dumps({"draftIds": store.list_ids()}))
        return 0
    except Exception as e:
        logger.error(
            "Command failed",
            command=args.command,
            error=str(e),
            exc_info=not isinstance(e, QuotationError),
        )
        print(json.dumps({"success": False, "error": str(e)}))
        return 1


def cli() -> int:
    """Console script entry point."""
    configure_logging()
    return run()


if __name__ == "__main__":
    sys.exit(cli())
