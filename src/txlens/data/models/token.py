"""Token and network models."""

from pydantic import Field

from txlens.data.models.base import TxLensModel


class BlockchainToken(TxLensModel):
    """A fungible or non-fungible asset known to the wallet.

    Identity is ``(contract_address, chain_id)`` with the address compared
    case-insensitively. The chain's native asset has an empty contract
    address.

    Example:
        usdc = BlockchainToken(
            contract_address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            name="USD Coin",
            symbol="USDC",
            decimals=6,
            chain_id="0x1",
        )
    """

    contract_address: str = ""
    name: str = ""
    symbol: str = ""
    decimals: int = Field(default=18, ge=0)
    chain_id: str = ""
    is_erc20: bool = False
    is_erc721: bool = False
    logo: str = ""
    coin_type: str = ""

    @property
    def is_native(self) -> bool:
        return self.contract_address == ""

    def same_token(self, other: "BlockchainToken") -> bool:
        """Check identity against another token."""
        return (
            self.contract_address.lower() == other.contract_address.lower()
            and self.chain_id == other.chain_id
        )


class NetworkInfo(TxLensModel):
    """Metadata for the chain a transaction runs on.

    Attributes:
        chain_id: Chain id (``0x1`` for Ethereum mainnet, ``0x65`` for Solana mainnet).
        symbol: Native asset symbol (ETH, SOL, FIL).
        decimals: Native asset decimals (18, 9, 18).
        coin: Coin family (``eth``, ``sol``, ``fil``).
    """

    chain_id: str
    chain_name: str = ""
    symbol: str
    symbol_name: str = ""
    decimals: int = Field(ge=0)
    coin: str = "eth"
    logo: str = ""
