#!/usr/bin/env python3
"""
Run checkout operations from the terminal:
- create/fetch an order form
- simulate a cart
- add an item, insert a coupon
- list orders

Runs against the mock transport with --mock (or use_mock in config/checkout_config.yml),
otherwise against the configured VTEX account.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from checkout_gateway.clients import build_checkout_client
from checkout_gateway.contracts.checkout import SimulationData, SimulationItem
from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.contracts.errors import CheckoutResult
from checkout_gateway.utils.config_loader import load_checkout_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_item(raw: str) -> SimulationItem:
    """Parse SKU:QUANTITY[:SELLER]."""
    parts = raw.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Invalid item '{raw}'. Expected SKU:QUANTITY[:SELLER]")
    seller = parts[2] if len(parts) == 3 else "1"
    return SimulationItem(id=parts[0], quantity=int(parts[1]), seller=seller)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run checkout operations against the checkout backend")
    parser.add_argument("--config", type=Path, default=None, help="Path to checkout_config.yml")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock backend")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--session", default=None, help="vtex_session token")
    parser.add_argument("--segment", default=None, help="vtex_segment token")
    parser.add_argument("--auth-token", default=None, help="Store user auth token (VtexIdclientAutCookie)")
    parser.add_argument("--channel", default=None, help="Sales channel (sc)")
    parser.add_argument("--order-form", default=None, help="Order form id")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("order-form", help="Create or fetch the session order form")

    simulate = sub.add_parser("simulate", help="Simulate a cart")
    simulate.add_argument("items", nargs="+", type=parse_item, help="SKU:QUANTITY[:SELLER]")
    simulate.add_argument("--country", default="BRA")
    simulate.add_argument("--postal-code", default=None)

    add_item = sub.add_parser("add-item", help="Add items to the order form")
    add_item.add_argument("items", nargs="+", type=parse_item, help="SKU:QUANTITY[:SELLER]")

    coupon = sub.add_parser("coupon", help="Insert a coupon")
    coupon.add_argument("code")

    sub.add_parser("orders", help="List the user's orders")
    return parser


async def run(args: argparse.Namespace) -> CheckoutResult:
    config = load_checkout_config(args.config)
    if args.mock:
        config = config.model_copy(update={"use_mock": True})

    context = RequestContext(
        session_token=args.session,
        segment_token=args.segment,
        store_user_auth_token=args.auth_token,
        channel=args.channel,
        order_form_id=args.order_form,
    )
    client = build_checkout_client(context, config)
    try:
        return await execute(client, args, context)
    finally:
        await client.transport.aclose()


async def execute(client, args: argparse.Namespace, context: RequestContext) -> CheckoutResult:
    if args.command == "order-form":
        return await client.order_form()
    if args.command == "simulate":
        data = SimulationData(country=args.country, items=args.items, postal_code=args.postal_code)
        return await client.simulation(data)
    if args.command == "orders":
        return await client.orders()

    # Remaining commands address an order form; the mock backend needs one to exist first.
    order_form_id = args.order_form
    if order_form_id is None:
        created = await client.order_form()
        if not created.ok:
            return created
        order_form_id = created.value["orderFormId"]
        client = client.with_context(context.with_order_form(order_form_id))

    if args.command == "add-item":
        return await client.add_item(order_form_id, [item.model_dump() for item in args.items])
    return await client.insert_coupon(order_form_id, args.code)


def main() -> int:
    args = build_parser().parse_args()
    setup_logging(args.verbose)

    result = asyncio.run(run(args))
    if not result.ok:
        error = result.error
        print(f"{error.kind.value} (status={error.status_code}, reason={error.reason}): {error.message}", file=sys.stderr)
        return 1
    print(json.dumps(result.value, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
