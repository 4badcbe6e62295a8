"""Example usage of grafana_metrics library."""
from grafana_metrics import Config, MetricOptions, MetricsGenerator, get_logger


def main():
    # Create config (loads from .configs or env vars)
    cfg = Config()
    get_logger(cfg)

    labels = {
        "chain": "solana",
        "network": "mainnet",
        "validator_account": "VALIDATOR_PUBKEY",
        "epoch": "123",
        "block_id": "456789",
    }

    print("=== One-shot: define and render ===")
    generator = MetricsGenerator(cfg)
    print(generator.define_and_format(
        "solana_validator_leader_reward_reported_lamports",
        "Number of lamports reported as leader reward by the validator in the current epoch.",
        MetricOptions(1000000, labels=labels),
    ))

    print("\n=== Buffered: define on first use ===")
    buffered = MetricsGenerator(cfg)
    buffered.append_with_define(
        "solana_validator_leader_reward_reported_lamports",
        "Number of lamports reported as leader reward by the validator in the current epoch.",
        MetricOptions(1000000, labels=labels),
    )
    buffered.append_with_define(
        "solana_validator_priority_fees_lamports",
        "Priority fees collected by the validator in lamports.",
        MetricOptions(50000, labels=labels),
    )
    print(buffered.get_output())

    print("\n=== Define first, then append ===")
    explicit = MetricsGenerator(cfg)
    explicit.define("solana_custom_metric", "A custom metric for demonstration purposes.", "counter")
    explicit.define("solana_performance_score", "Performance score of the validator (0-100).", "gauge")
    explicit.append("solana_custom_metric", {"validator": "VALIDATOR_PUBKEY", "epoch": "123"}, 42)
    explicit.append("solana_performance_score", {"validator": "VALIDATOR_PUBKEY", "metric_type": "block_production"}, 95.5)
    print(explicit.get_output())

    print("\n=== Validator data ===")
    validators = MetricsGenerator(cfg)
    validators.generate_from_validator_data(
        {
            "epoch": 123,
            "blocks": 456789,
            "leader_reward_reported_lamports": 1000000,
            "priority_fees_lamports": 50000,
            "votes": 1500,
            "non_votes": 0,
        },
        "solana",
        "mainnet",
        "VALIDATOR_PUBKEY",
    )
    print(validators.get_output())


if __name__ == "__main__":
    main()
