import argparse
import logging
import sys
from pathlib import Path

from salonbook.app_shell.config import get_settings, validate_ops_rules
from salonbook.app_shell.context import ServiceContext
from salonbook.components.export import (
    ExportHistoryInput,
    run_export_directory,
    run_export_history,
)
from salonbook.components.ledger import RecordVisitInput, discount_status, run_record_visit
from salonbook.core.ports.store import BackendError
from salonbook.domain.entities import CustomerCandidate
from salonbook.domain.errors import SalonError
from salonbook.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_context() -> ServiceContext:
    settings = get_settings()
    if not settings.rules_path.exists():
        logger.error(f"Rules file {settings.rules_path} not found.")
        sys.exit(1)

    rules = load_rules(settings.rules_path)
    logging.getLogger().setLevel(rules.logging.level)
    validate_ops_rules(rules, settings)

    ctx = ServiceContext.create(settings.db_path(rules), rules)
    ctx.migrate()
    return ctx


def handle_list(ctx: ServiceContext, args: argparse.Namespace) -> None:
    ctx.directory.refresh()
    matches = ctx.directory.filter(args.search or "")

    if not matches:
        if args.search:
            print("見つかりませんでした。")
        else:
            print("顧客が登録されていません。`add` で登録してください。")
        return

    grouped = ctx.directory.group_by_phonetic_row(matches)
    for row, members in grouped.items():
        print(f"■ {row.value}")
        for customer in members:
            status = discount_status(customer, ctx.discount_interval, ctx.discount_percent)
            badge = f"  [次回{status.discount_percent}%オフ]" if status.eligible else ""
            print(f"  {customer.id}  {customer.name} ({customer.kana}){badge}")


def handle_add(ctx: ServiceContext, args: argparse.Namespace) -> None:
    customer = ctx.directory.add(
        CustomerCandidate(
            name=args.name,
            kana=args.kana or "",
            phone=args.phone or "",
            email=args.email or "",
        )
    )
    print(f"登録しました: {customer.name} (ID: {customer.id})")


def handle_show(ctx: ServiceContext, args: argparse.Namespace) -> None:
    customer = ctx.directory.get(args.customer_id)
    status = discount_status(customer, ctx.discount_interval, ctx.discount_percent)

    print(f"{customer.name} 様")
    print(customer.phone or "電話番号なし")
    print(f"来店回数: {customer.visit_count} 回")
    if status.eligible:
        print(f"次回 {status.discount_percent}% OFF!")
    else:
        print(f"あと {status.visits_remaining} 回で割引です")

    if not customer.history:
        print("まだ記録がありません。")
        return
    print("過去の施術記録:")
    for record in customer.history:
        print(f"  {record.date}  {record.note or '（メモなし）'}")


def handle_visit(ctx: ServiceContext, args: argparse.Namespace) -> None:
    visit_date = args.date or ctx.clock.today().isoformat()
    result = run_record_visit(
        RecordVisitInput(customer_id=args.customer_id, date=visit_date, note=args.note or ""),
        ctx.store,
        interval=ctx.discount_interval,
        percent=ctx.discount_percent,
    )
    print(f"記録しました！ ({result.customer.name}: {result.customer.visit_count} 回)")
    if result.discount.eligible:
        print(f"次回 {result.discount.discount_percent}% OFF!")


def handle_delete(ctx: ServiceContext, args: argparse.Namespace) -> None:
    if not args.yes:
        logger.error("Deleting a customer cannot be undone. Re-run with --yes to confirm.")
        sys.exit(1)

    ctx.directory.remove(args.customer_id)
    print("削除しました。")


def _write_export(out_dir: str, filename: str, payload: bytes) -> Path:
    target_dir = Path(out_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / filename
    target.write_bytes(payload)
    return target


def handle_export_history(ctx: ServiceContext, args: argparse.Namespace) -> None:
    export = run_export_history(
        ExportHistoryInput(customer_id=args.customer_id), ctx.directory, ctx.csv_config
    )
    target = _write_export(args.out, export.filename, export.payload)
    print(f"Exported {export.rows} records to {target}")


def handle_export_all(ctx: ServiceContext, args: argparse.Namespace) -> None:
    customers = ctx.directory.refresh()
    export = run_export_directory(customers, ctx.clock, ctx.csv_config)
    target = _write_export(args.out, export.filename, export.payload)
    print(f"Exported {export.rows} customers to {target}")


HANDLERS = {
    "list": handle_list,
    "add": handle_add,
    "show": handle_show,
    "visit": handle_visit,
    "delete": handle_delete,
    "export-history": handle_export_history,
    "export-all": handle_export_all,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Salon customer book")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    list_parser = subparsers.add_parser("list", help="List customers grouped by reading")
    list_parser.add_argument("--search", help="Substring of name or reading")

    # add
    add_parser = subparsers.add_parser("add", help="Register a new customer")
    add_parser.add_argument("name", help="Display name")
    add_parser.add_argument("--kana", help="Reading (katakana)")
    add_parser.add_argument("--phone")
    add_parser.add_argument("--email")

    # show
    show_parser = subparsers.add_parser("show", help="Show a customer and their history")
    show_parser.add_argument("customer_id")

    # visit
    visit_parser = subparsers.add_parser("visit", help="Record a visit")
    visit_parser.add_argument("customer_id")
    visit_parser.add_argument("--date", help="YYYY-MM-DD (default: today)")
    visit_parser.add_argument("--note", help="Treatment notes")

    # delete
    delete_parser = subparsers.add_parser("delete", help="Delete a customer permanently")
    delete_parser.add_argument("customer_id")
    delete_parser.add_argument("--yes", action="store_true", help="Confirm the deletion")

    # export-history
    history_parser = subparsers.add_parser("export-history", help="Export visit history CSV")
    history_parser.add_argument("customer_id")
    history_parser.add_argument("--out", default=".", help="Output directory")

    # export-all
    all_parser = subparsers.add_parser("export-all", help="Export the customer list CSV")
    all_parser.add_argument("--out", default=".", help="Output directory")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        ctx = get_context()
        HANDLERS[args.command](ctx, args)
    except SalonError as e:
        logger.error(str(e))
        sys.exit(1)
    except BackendError as e:
        logger.error(f"Storage failure: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
