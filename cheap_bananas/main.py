from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

from .api_client import ApiError, PriceApiClient
from .compare import compare_product
from .config import ENV_KEYS, Config
from .fields import edit_field, split_line, suggest
from .modes import MODES, get_mode
from .payload import build_request, validate
from .units import normalize_unit, price_per_unit

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _field_assignment(text: str) -> tuple[int, str]:
    idx, sep, value = text.partition("=")
    if not sep or not idx.strip().isdigit():
        raise argparse.ArgumentTypeError(f"expected IDX=VALUE, got {text!r}")
    return int(idx), value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cheap-bananas")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")

    sub = p.add_subparsers(dest="cmd", required=False)

    sub.add_parser("modes", help="List entry modes and their positional fields")

    p_config = sub.add_parser("config", help="Config commands")
    sub_config = p_config.add_subparsers(dest="config_cmd", required=True)
    sub_config.add_parser("keys", help="List recognised environment variables")
    sub_config.add_parser("show", help="Print the effective configuration")

    p_norm = sub.add_parser("normalize", help="Normalize a volume to its canonical unit")
    p_norm.add_argument("value", help="Magnitude, e.g. 500")
    p_norm.add_argument("unit", help="Unit symbol, e.g. g")
    p_norm.add_argument("--price", default=None, help="Also print the price per canonical unit")

    p_add = sub.add_parser("add", help="Send one product, shop or price entry to the API")
    p_add.add_argument("mode", choices=[m.key for m in MODES])
    p_add.add_argument("text", nargs="*", help="Positional field values; use _ to skip a field")
    p_add.add_argument(
        "--set", dest="assignments", action="append", default=[], type=_field_assignment,
        metavar="IDX=VALUE", help="Set field IDX after the line is split (repeatable)",
    )
    p_add.add_argument(
        "--complete", action="store_true",
        help="Expand field prefixes to their first matching suggestion (e.g. tes -> tesco)",
    )
    p_add.add_argument("--dry-run", action="store_true", help="Print the request body, do not send it")

    p_cmp = sub.add_parser("compare", help="Rank price entries of a product by unit price")
    p_cmp.add_argument("name", help="Product name")
    p_cmp.add_argument("--json", dest="json_path", default=None, help="Also write the report as JSON")

    p_del = sub.add_parser("delete-entry", help="Delete a price entry by id")
    p_del.add_argument("id")

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    try:
        cfg = Config.load_from_env()
    except RuntimeError as exc:
        print(f"ERROR: {exc}")
        return 1
    setup_logging(args.log_level or cfg.log_level)

    if args.cmd == "modes":
        for m in MODES:
            print(f"{m.key}  ({m.label})  -> POST {m.path}")
            print(f"  {m.placeholder()}")
            for i, f in enumerate(m.fields):
                req = "*" if f.required else " "
                hint = f"  [{', '.join(f.suggestions)}]" if f.suggestions else ""
                print(f"  {i}. {f.label}{req}{hint}")
        return 0

    if args.cmd == "config":
        if args.config_cmd == "keys":
            for k in ENV_KEYS:
                print(k)
            return 0
        if args.config_cmd == "show":
            print(f"api_url={cfg.api_url}")
            print(f"timeout_s={cfg.timeout_s}")
            print(f"log_level={cfg.log_level}")
            return 0

    if args.cmd == "normalize":
        nq = normalize_unit(args.value, args.unit)
        print(f"{nq.value} {nq.unit}")
        if args.price is not None:
            print(f"{price_per_unit(args.price, nq.value)}/{nq.unit}")
        return 0

    client = PriceApiClient(api_url=cfg.api_url, timeout_s=cfg.timeout_s)
    try:
        if args.cmd == "add":
            return _run_add(args, client)
        if args.cmd == "compare":
            return _run_compare(args, client)
        if args.cmd == "delete-entry":
            client.delete_product_entry(args.id)
            print(f"OK: deleted product entry {args.id}")
            return 0
    except ApiError as exc:
        print(f"ERROR: {exc}")
        return 1
    except requests.RequestException as exc:
        logger.debug("request failed", exc_info=True)
        print(f"ERROR: could not reach {cfg.api_url}: {exc}")
        return 1

    raise RuntimeError("unreachable")


def _run_add(args, client: PriceApiClient) -> int:
    mode = get_mode(args.mode)
    values = split_line(" ".join(args.text), mode.field_count)

    for idx, value in args.assignments:
        if idx >= mode.field_count:
            print(f"ERROR: {mode.label} has no field {idx} (fields 0-{mode.field_count - 1})")
            return 1
        values = split_line(edit_field(values, idx, value), mode.field_count)

    if args.complete:
        for i, f in enumerate(mode.fields):
            hit = suggest(f.suggestions, values[i])
            if hit and hit != values[i]:
                logger.info("Completed %s: %s -> %s", f.label, values[i], hit)
                values[i] = hit

    errors = validate(mode, values)
    if errors:
        for e in errors:
            print(f"ERROR: {e}")
        return 1

    request = build_request(mode, values)
    if args.dry_run:
        print(f"POST {request.path}")
        print(json.dumps(request.body, indent=2))
        return 0

    if mode.key == "shop":
        new_id = client.create_shop_unique(request.body)
    else:
        new_id = client.submit(request)

    sent = ", ".join(
        f"{mode.fields[i].label if i < mode.field_count else 'Extra'}: {v}"
        for i, v in enumerate(values)
        if v
    )
    print(f"{mode.label} sent to backend! (id={new_id})")
    print(f"Sent values: [{sent}]")
    return 0


def _run_compare(args, client: PriceApiClient) -> int:
    report = compare_product(client, args.name)
    print(report.summary_text())
    if args.json_path:
        path = report.write_json(args.json_path)
        print(f"\nReport written to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
