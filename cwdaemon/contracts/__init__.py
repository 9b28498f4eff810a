"""Reference CosmWasm contracts that run against in-memory storage."""

__all__ = ["common", "compatibility", "counter", "mock_contract", "mock_contract_u64"]