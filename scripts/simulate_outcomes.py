#!/usr/bin/env python3
"""Print simulated UPI outcomes and edge-case guidance.

Draws payment and mandate registration outcomes with the configured success
rates and prints them as JSON, followed by the suggested action for every
failure code seen. Defaults come from the environment (see
``SimulationConfig.from_env``); flags override them.
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from upi_codes.config import SimulationConfig
from upi_codes.logging import get_logger, setup_logging
from upi_codes.lookup import handle_edge_case
from upi_codes.models import Status, TransactionType
from upi_codes.simulators import MandateSimulator, TransactionSimulator
from upi_codes.sinks import ConsoleSink

logger = get_logger(__name__)


def parse_args(config: SimulationConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate UPI transaction outcomes")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of outcomes per flow (default: 10)",
    )
    parser.add_argument(
        "--type",
        dest="transaction_type",
        choices=[t.name for t in TransactionType],
        default=TransactionType.PAY.name,
        help="Payment flow to simulate (default: PAY)",
    )
    parser.add_argument(
        "--success-rate",
        type=float,
        default=config.success_rate,
        help=f"Payment success probability (default: {config.success_rate})",
    )
    parser.add_argument(
        "--mandate-success-rate",
        type=float,
        default=config.mandate_success_rate,
        help=f"Mandate registration success probability (default: {config.mandate_success_rate})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print one JSON object per line",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    config = SimulationConfig.from_env()
    args = parse_args(config)
    setup_logging(config.log_level, config.log_format)

    tx_type = TransactionType[args.transaction_type]
    payments = list(
        TransactionSimulator(seed=args.seed, locale=config.locale).simulate_batch(
            args.count, tx_type, args.success_rate
        )
    )
    mandates = list(
        MandateSimulator(seed=args.seed, locale=config.locale).simulate_batch(
            args.count, args.mandate_success_rate
        )
    )

    sink = ConsoleSink(pretty=not args.compact)
    sink.write_batch(tx_type.value, payments)
    sink.write_batch("Mandate Registration", mandates)

    failures = Counter(o.code for o in payments + mandates if o.status != Status.SUCCESS)
    logger.info("Simulated %d outcomes, %d failures", len(payments) + len(mandates), sum(failures.values()))
    sink.write_batch("Suggested actions", [handle_edge_case(code) for code in sorted(failures)])
    sink.close()


if __name__ == "__main__":
    main()
