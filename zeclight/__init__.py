"""Light wallet building blocks: checkpoints, configuration, wallet options, send progress and chain state."""

__version__ = "0.1.0"
__all__ = ["checkpoints", "config", "wallet_options", "send_progress", "chain_state"]