"""HTTP client for the RPC and REST servers of a Cosmos chain."""

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from cosmos_swagger_gen.errors import ChainClientError, RestError, RpcError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20


class ChainURLs(BaseModel):
    rpc: str
    rest: str
    socket: str


class ChainPrefixes(BaseModel):
    prefix: str
    valoper_prefix: str
    cons_prefix: str


class ChainInfo(BaseModel):
    name: str
    urls: ChainURLs
    prefixes: ChainPrefixes
    decimals: int  # of the native token


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str:
    """Render `params` as a URL-encoded `?key=value&...`, skipping None values."""
    pairs = [(key, _query_value(value)) for key, value in (params or {}).items() if value is not None]
    if not pairs:
        return ""
    return "?" + str(httpx.QueryParams(pairs))


class ChainClient:
    """Makes RPC and REST requests against one chain's public endpoints."""

    def __init__(self, info: ChainInfo, client: httpx.Client | None = None):
        self.info = info
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS)

    @property
    def name(self) -> str:
        return self.info.name

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ChainClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, url: str, error_cls: type[ChainClientError], label: str) -> Any:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise error_cls(f"{label} request to {url} failed: {e}") from e

        if not response.is_success:
            logger.warning("%s request to %s returned %s", label, url, response.status_code)
            raise error_cls(f"{label} Error. Status: {response.status_code}", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise error_cls(f"{label} response from {url} is not JSON") from e

    def rpc_request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET `endpoint` on the RPC server and return the `result` of the JSON-RPC envelope."""
        url = f"{self.info.urls.rpc}{endpoint}{build_query(params)}"
        payload = self._get_json(url, RpcError, "RPC")
        if isinstance(payload, dict) and payload.get("error"):
            raise RpcError(f"RPC Error. Message: {payload['error']}")
        return payload.get("result") if isinstance(payload, dict) else payload

    def rest_get_request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET `endpoint` on the REST server and return the decoded body.

        Cosmos REST errors come back as `{code, message, details}`.
        """
        url = f"{self.info.urls.rest}{endpoint}{build_query(params)}"
        payload = self._get_json(url, RestError, "REST")
        if isinstance(payload, dict) and payload.get("message"):
            raise RestError(f"REST Error. Message: {payload['message']}")
        return payload

    # RPC

    def get_health(self):
        """Returns node heartbeat."""
        return self.rpc_request("/health")

    def get_status(self):
        return self.rpc_request("/status")

    def get_net_info(self):
        return self.rpc_request("/net_info")

    def get_blockchain(self, min_height: int | None = None, max_height: int | None = None):
        """Returns the block headers between `min_height` and `max_height` (max: 20)."""
        return self.rpc_request("/blockchain", {"minHeight": min_height, "maxHeight": max_height})

    def get_block(self, height: int | None = None):
        """Returns the block at `height`, or the latest block."""
        return self.rpc_request("/block", {"height": height})

    def get_block_by_hash(self, block_hash: str):
        return self.rpc_request("/block_by_hash", {"hash": block_hash})

    def get_block_results(self, height: int | None = None):
        return self.rpc_request("/block_results", {"height": height})

    def get_commit(self, height: int | None = None):
        return self.rpc_request("/commit", {"height": height})

    def get_validators(self, height: int | None = None, page: int | None = None, per_page: int | None = None):
        return self.rpc_request("/validators", {"height": height, "page": page, "per_page": per_page})

    def get_genesis(self):
        return self.rpc_request("/genesis")

    def get_dump_consensus_state(self):
        return self.rpc_request("/dump_consensus_state")

    def get_consensus_state(self):
        return self.rpc_request("/consensus_state")

    def get_consensus_params(self, height: int | None = None):
        return self.rpc_request("/consensus_params", {"height": height})

    def get_unconfirmed_txs(self, limit: int | None = None):
        """Returns up to `limit` unconfirmed transactions (default 30, max 100)."""
        return self.rpc_request("/unconfirmed_txs", {"limit": limit})

    def get_num_unconfirmed_txs(self):
        return self.rpc_request("/num_unconfirmed_txs")

    def search_tx(self, query: str, prove: bool | None = None, page: int | None = None,
                  per_page: int | None = None, order_by: str | None = None):
        return self.rpc_request(
            "/tx_search",
            {"query": query, "prove": prove, "page": page, "per_page": per_page, "order_by": order_by},
        )

    def search_block(self, query: str, page: int | None = None, per_page: int | None = None,
                     order_by: str | None = None):
        return self.rpc_request(
            "/block_search", {"query": query, "page": page, "per_page": per_page, "order_by": order_by}
        )

    def get_tx(self, tx_hash: str, prove: bool | None = None):
        """Returns the transaction with `tx_hash`, with its inclusion proof if `prove` is set."""
        return self.rpc_request("/tx", {"hash": tx_hash, "prove": prove})

    def broadcast_evidence(self, evidence: str):
        """Broadcasts `evidence` of misbehavior."""
        return self.rpc_request("/broadcast_evidence", {"evidence": evidence})

    def broadcast_tx_sync(self, tx: str):
        """Broadcasts `tx` and waits for the CheckTx result only."""
        return self.rpc_request("/broadcast_tx_sync", {"tx": tx})

    def broadcast_tx_async(self, tx: str):
        """Broadcasts `tx` and returns right away."""
        return self.rpc_request("/broadcast_tx_async", {"tx": tx})

    def broadcast_tx_commit(self, tx: str):
        """Broadcasts `tx` and waits for both the CheckTx and DeliverTx results."""
        return self.rpc_request("/broadcast_tx_commit", {"tx": tx})

    def check_tx(self, tx: str):
        """Checks `tx` without executing it."""
        return self.rpc_request("/check_tx", {"tx": tx})

    def get_abci_info(self):
        return self.rpc_request("/abci_info")

    def query_abci(self, path: str, data: str, height: int | None = None, prove: bool | None = None):
        return self.rpc_request("/abci_query", {"path": path, "data": data, "height": height, "prove": prove})

    # REST
    # List endpoints take their query (filters, `pagination.*` keys) as a mapping.

    def get_node_info(self):
        return self.rest_get_request("/node_info")

    def get_proposals(self, query: Mapping[str, Any] | None = None):
        """Returns all proposals, filtered by e.g. `proposal_status`."""
        return self.rest_get_request("/cosmos/gov/v1beta1/proposals", query)

    def get_proposal(self, proposal_id: int):
        """Returns proposal details based on `proposal_id`."""
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}")

    def get_proposal_deposits(self, proposal_id: int, query: Mapping[str, Any] | None = None):
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}/deposits", query)

    def get_proposal_depositor(self, proposal_id: int, depositor: str):
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}/deposits/{depositor}")

    def get_proposal_tally(self, proposal_id: int):
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}/tally")

    def get_proposal_votes(self, proposal_id: int, query: Mapping[str, Any] | None = None):
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}/votes", query)

    def get_proposal_voter(self, proposal_id: int, voter: str):
        return self.rest_get_request(f"/cosmos/gov/v1beta1/proposals/{proposal_id}/votes/{voter}")

    def get_slashing_params(self):
        return self.rest_get_request("/cosmos/slashing/v1beta1/params")

    def get_slashing_signing_infos(self, query: Mapping[str, Any] | None = None):
        """Returns the signing info of every validator."""
        return self.rest_get_request("/cosmos/slashing/v1beta1/signing_infos", query)

    def get_slashing_signing_info(self, cons_address: str):
        return self.rest_get_request(f"/cosmos/slashing/v1beta1/signing_infos/{cons_address}")

    def get_all_evidence(self, query: Mapping[str, Any] | None = None):
        return self.rest_get_request("/cosmos/evidence/v1beta1/evidence", query)

    def get_evidence(self, evidence_hash: str):
        return self.rest_get_request(f"/cosmos/evidence/v1beta1/evidence/{evidence_hash}")

    def get_balances(self, address: str, query: Mapping[str, Any] | None = None):
        """Returns the balance of every coin held by `address`."""
        return self.rest_get_request(f"/cosmos/bank/v1beta1/balances/{address}", query)

    def get_balance(self, address: str, denom: str):
        """Returns the balance of a single coin for a single account."""
        return self.rest_get_request(f"/cosmos/bank/v1beta1/balances/{address}/by_denom", {"denom": denom})

    def get_staking_params(self):
        return self.rest_get_request("/cosmos/staking/v1beta1/params")

    def get_bank_params(self):
        return self.rest_get_request("/cosmos/bank/v1beta1/params")

    def get_distribution_params(self):
        return self.rest_get_request("/cosmos/distribution/v1beta1/params")

    def get_auth_params(self):
        return self.rest_get_request("/cosmos/auth/v1beta1/params")

    def get_supplies(self, query: Mapping[str, Any] | None = None):
        """Returns the total supply of every coin."""
        return self.rest_get_request("/cosmos/bank/v1beta1/supply", query)

    def get_supply(self, denom: str):
        return self.rest_get_request(f"/cosmos/bank/v1beta1/supply/{denom}")
