"""Well-known addresses and numeric constants used during parsing."""

from typing import Final

# approve(spender, MAX_UINT256) grants an unlimited allowance
MAX_UINT256: Final[str] = "0x" + "f" * 64

# Placeholder used in 0x fill paths for the chain's native asset
NATIVE_ASSET_CONTRACT_ADDRESS_0X: Final[str] = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"

# 0x exchange proxy; calls to it are swaps whatever the declared type says
SWAP_EXCHANGE_PROXY: Final[str] = "0xdef1c0ded9bec7f1a1670819833240f027b25eff"

# One EVM address in a fill path: 20 bytes as hex
FILL_PATH_ADDRESS_HEX_LENGTH: Final[int] = 40

# Default decimals when no token or network resolves
DEFAULT_EVM_DECIMALS: Final[int] = 18
DEFAULT_SPL_DECIMALS: Final[int] = 9
NFT_DECIMALS: Final[int] = 0

# Display
DISPLAY_PRECISION: Final[int] = 6
APPROVAL_NATIVE_TOTAL_PRECISION: Final[int] = 2
FIAT_PRECISION: Final[int] = 2

# Division results keep this many fractional digits
DIVISION_DECIMAL_PLACES: Final[int] = 20
