# staking_tracker/registry/defaults.py

from ..types import TokenDescriptor, EvmAddress


DEFAULT_CHAIN_LABEL = "Manta Pacific Sepolia"

# totalAmountStaked() is reported with 6 decimals on every supported contract
TVL_DECIMALS = 6

STABLECOIN_SYMBOLS = frozenset({"USDC", "USDT"})

STAKING_CATEGORY = "Staking"
STABLECOIN_CATEGORY = "Stablecoin"

DEFAULT_TOKENS = (
    TokenDescriptor(
        symbol="UNI",
        token_address=EvmAddress("0x6c8D1fd3AA9F436CBA20E4b6A5aeDb1bf814A732"),
        staking_address=EvmAddress("0xa976c4930e253CE56Ff129404a95F0578345C113"),
        project_name="Uniswap",
        logo_url="https://cryptologos.cc/logos/uniswap-uni-logo.png",
    ),
    TokenDescriptor(
        symbol="USDC",
        token_address=EvmAddress("0x94F0Fd09f425Be15C7Bc0575Aa71780A044039e3"),
        staking_address=EvmAddress("0x23218e77D017AD293496976A5ee9Eb3F3F5EF217"),
        project_name="AaveV3",
        logo_url="https://cryptologos.cc/logos/usd-coin-usdc-logo.png",
    ),
    TokenDescriptor(
        symbol="USDT",
        token_address=EvmAddress("0x7598099fFC36dCC3e96F3aB33f18E86F85ae7E44"),
        staking_address=EvmAddress("0xd39ef51d10FAeE75FE6fe66537F3D8128Ec72dA5"),
        project_name="CompoundV3",
        logo_url="https://cryptologos.cc/logos/tether-usdt-logo.png",
    ),
    TokenDescriptor(
        symbol="DAI",
        token_address=EvmAddress("0x74A8Ee760959AF0B18307861e92769CfEcC42f9B"),
        staking_address=EvmAddress("0x60e78201ac487E5C382379dc8f9e39a896396728"),
        project_name="StargateV3",
        logo_url="https://cryptologos.cc/logos/dai-dai-logo.png",
    ),
    TokenDescriptor(
        symbol="WETH",
        token_address=EvmAddress("0x3455b6B22cBD998512286428De8844CBFBcc06C2"),
        staking_address=EvmAddress("0xF50c64a2C422C6809e5BdbcF4Bb5af38D06a033a"),
        project_name="UsdxMoney",
        logo_url="https://img.cryptorank.io/coins/weth1701090834118.png",
    ),
)
