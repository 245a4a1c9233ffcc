"""ChainRegistry: read-only lookup of chain configurations by short name."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from cw3d.errors import UnknownChainError


@dataclass(frozen=True)
class ChainConfig:
    """Mainnet/testnet names and chain ids for one supported chain."""

    short_name: str
    mainnet_name: str
    mainnet_chain_id: str
    testnet_chain_id: str
    testnet_chain_name: str


DEFAULT_CHAINS = (
    ChainConfig("sepolia", "Ethereum", "1", "11155111", "Sepolia"),
    ChainConfig("base-sepolia", "Base", "8453", "84532", "Base Sepolia"),
    ChainConfig("arb-sepolia", "Arbitrum", "42161", "421614", "Arbitrum Sepolia"),
    ChainConfig("opt-sepolia", "Optimism", "10", "11155420", "OP Sepolia"),
    ChainConfig("polygon-amoy", "Polygon", "137", "80002", "Polygon Amoy"),
    ChainConfig("shape-sepolia", "Shape", "360", "11011", "Shape Sepolia"),
    ChainConfig("zksync-sepolia", "ZKsync", "324", "300", "ZKsync Sepolia"),
)


class ChainRegistry:
    """Looks up chains by exact, case-sensitive short name.

    Args:
        chains: The chain records to serve. Order is preserved, and the
            first record wins if two share a short name.
    """

    def __init__(self, chains: Iterable[ChainConfig]):
        self._chains = list(chains)

    @classmethod
    def default(cls):
        """Return a registry over the built-in chain table."""
        return cls(DEFAULT_CHAINS)

    def find_chain(self, short_name: str) -> Optional[ChainConfig]:
        for chain in self._chains:
            if chain.short_name == short_name:
                return chain
        return None

    def require_chain(self, short_name: str) -> ChainConfig:
        """Return the chain for short_name.

        Raises:
            UnknownChainError: If no chain has that short name.
        """
        chain = self.find_chain(short_name)
        if chain is None:
            raise UnknownChainError(short_name, self.short_names())
        return chain

    def short_names(self) -> List[str]:
        return [chain.short_name for chain in self._chains]

    def chains(self) -> List[ChainConfig]:
        return list(self._chains)
