"""Solana validator metrics built on top of MetricsGenerator.

Each field of the validator data maps to one gauge. All samples in a batch
share the same chain/network/account/epoch/block labels.
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping

from .models import MetricType

if TYPE_CHECKING:
    from .metrics import MetricsGenerator

logger = logging.getLogger("grafana_metrics")

METRIC_PREFIX = "solana_validator"

# data field -> help text, in emission order
VALIDATOR_FIELDS: Dict[str, str] = {
    "leader_reward_reported_lamports": "Number of lamports reported as leader reward by the validator in the current epoch.",
    "priority_fees_lamports": "Priority fees collected by the validator in lamports.",
    "transaction_fees_total_lamports": "Total transaction fees in lamports.",
    "tips_lamports": "Tips collected by the validator in lamports.",
    "compute_units_consumed": "Compute units consumed by the validator.",
    "votes": "Number of votes by the validator.",
    "non_votes": "Number of non-votes by the validator.",
}


def metric_name(field: str) -> str:
    return f"{METRIC_PREFIX}_{field}"


def build_labels(data: Mapping[str, Any], chain: str, network: str, account: str) -> Dict[str, Any]:
    return {
        "chain": chain,
        "network": network,
        "validator_account": account,
        "epoch": data.get("epoch"),
        "block_id": data.get("blocks"),
    }


def generate_from_validator_data(
    generator: "MetricsGenerator",
    data: Mapping[str, Any],
    chain: str,
    network: str,
    account: str,
) -> None:
    """Append one gauge sample per validator field present in ``data``.

    Missing fields and fields set to None are skipped. Zero and empty
    strings are emitted. All values are checked before the first append,
    so a rejected value leaves the buffer untouched.
    """
    for field, help_text in VALIDATOR_FIELDS.items():
        name = metric_name(field)
        if not generator.is_defined(name):
            generator.define(name, help_text, MetricType.GAUGE)

    labels = build_labels(data, chain, network, account)
    samples = []
    for field in VALIDATOR_FIELDS:
        value = data.get(field)
        if value is None:
            logger.debug(f"Validator {account}: no {field}, skipping")
            continue
        generator.check_value(metric_name(field), value)
        samples.append((metric_name(field), value))

    for name, value in samples:
        generator.append(name, labels, value)

    logger.debug(f"Validator {account}: appended {len(samples)} samples (chain={chain}, network={network})")
