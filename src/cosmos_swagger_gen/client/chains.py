"""Public endpoints of the supported chains."""

import httpx

from cosmos_swagger_gen.client.chain import ChainClient, ChainInfo
from cosmos_swagger_gen.errors import UnknownChainError


def _info(name: str, rpc: str, rest: str, socket: str, prefix: str, valoper: str, cons: str,
          decimals: int = 6) -> ChainInfo:
    return ChainInfo(
        name=name,
        urls={"rpc": rpc, "rest": rest, "socket": socket},
        prefixes={"prefix": prefix, "valoper_prefix": valoper, "cons_prefix": cons},
        decimals=decimals,
    )


CHAIN_INFOS: dict[str, ChainInfo] = {
    "axelar": _info(
        "Axelar",
        "https://rpc.cosmos.directory/axelar",
        "https://axelar-api.polkachu.com",
        "wss://axelar-rpc.chainode.tech/websocket",
        "axelar", "axelarvaloper", "axelarvalcon",
    ),
    "celestia": _info(
        "Celestia",
        "https://rpc.celestia.testnet.run",
        "https://api.celestia.testnet.run",
        "wss://rpc.celestia.testnet.run/websocket",
        "celestia", "celestiavaloper", "celestiavalcon",
    ),
    "kyve": _info(
        "Kyve",
        "https://rpc.beta.kyve.network",
        "https://api.beta.kyve.network",
        "wss://rpc.beta.kyve.network/websocket",
        "kyve", "kyvevaloper", "kyvevalcon",
    ),
    "osmosis": _info(
        "Osmosis",
        "https://rpc.cosmos.directory/osmosis",
        "https://rest.cosmos.directory/osmosis",
        "wss://rpc.osmosis.interbloc.org/websocket",
        "osmosis", "osmovaloper", "osmovalcons",
    ),
    "secret": _info(
        "Secret",
        "https://rpc.cosmos.directory/secretnetwork",
        "https://rest.cosmos.directory/secretnetwork",
        "wss://rpc.secret.express/websocket",
        "secret", "secretvaloper", "secretvalcon",
    ),
    "evmos": _info(
        "Evmos",
        "https://rpc.cosmos.directory/evmos",
        "https://evmos-api.polkachu.com",
        "wss://rpc.evmos.bh.rocks/websocket",
        "evmos", "evmosvaloper", "evmosvalcon",
        decimals=18,
    ),
}


def get_chain(name: str, client: httpx.Client | None = None) -> ChainClient:
    """Return a client for the chain called `name` (case-insensitive)."""
    info = CHAIN_INFOS.get(name.lower())
    if info is None:
        raise UnknownChainError(f"Unknown chain '{name}'. Available: {', '.join(CHAIN_INFOS)}")
    return ChainClient(info, client=client)
