"""
Ready-made interception presets for a CIP-30 wallet API and a Mesh-style
provider. Each maps method names to the source/stage they belong to;
unknown methods fall back to the preset default. camelCase (JS bridge) and
snake_case (Python SDK) method names are both recognized.
"""

from __future__ import annotations

from typing import Any

from cardano_errors.core.codes import ErrorSource, ErrorStage
from cardano_errors.normalizer import ErrorNormalizer, NormalizerConfig
from cardano_errors.safety.safe_provider import OnError, with_error_safety

_WALLET_QUERY = (ErrorSource.WALLET_QUERY, ErrorStage.BUILD)
_WALLET_SIGN = (ErrorSource.WALLET_SIGN, ErrorStage.SIGN)
_WALLET_SUBMIT = (ErrorSource.WALLET_SUBMIT, ErrorStage.SUBMIT)
_PROVIDER_QUERY = (ErrorSource.PROVIDER_QUERY, ErrorStage.BUILD)
_PROVIDER_SUBMIT = (ErrorSource.PROVIDER_SUBMIT, ErrorStage.SUBMIT)

CIP30_METHOD_CONTEXT: dict[str, tuple[ErrorSource, ErrorStage]] = {
    "getUtxos": _WALLET_QUERY,
    "get_utxos": _WALLET_QUERY,
    "signTx": _WALLET_SIGN,
    "sign_tx": _WALLET_SIGN,
    "signData": _WALLET_SIGN,
    "sign_data": _WALLET_SIGN,
    "submitTx": _WALLET_SUBMIT,
    "submit_tx": _WALLET_SUBMIT,
}

MESH_PROVIDER_METHOD_CONTEXT: dict[str, tuple[ErrorSource, ErrorStage]] = {
    "submitTx": _PROVIDER_SUBMIT,
    "submit_tx": _PROVIDER_SUBMIT,
    "fetchAddressUTxOs": _PROVIDER_QUERY,
    "fetch_address_utxos": _PROVIDER_QUERY,
    "fetchProtocolParameters": _PROVIDER_QUERY,
    "fetch_protocol_parameters": _PROVIDER_QUERY,
    "fetchAccountInfo": _PROVIDER_QUERY,
    "fetch_account_info": _PROVIDER_QUERY,
}


def cip30_wallet_preset(
    wallet_api: Any,
    wallet_hint: str | None = None,
    normalizer: ErrorNormalizer | None = None,
    config: NormalizerConfig | None = None,
    on_error: OnError | None = None,
) -> Any:
    """Wrap a CIP-30 wallet API; errors carry the wallet source/stage of the failing method."""

    def context_for(method: str, args: tuple) -> dict[str, Any]:
        source, stage = CIP30_METHOD_CONTEXT.get(method, _WALLET_QUERY)
        return {"source": source, "stage": stage, "wallet_hint": wallet_hint}

    return with_error_safety(wallet_api, context_for, normalizer=normalizer, config=config, on_error=on_error)


def mesh_provider_preset(
    provider: Any,
    provider_name: str | None = None,
    normalizer: ErrorNormalizer | None = None,
    config: NormalizerConfig | None = None,
    on_error: OnError | None = None,
) -> Any:
    """Wrap a Mesh-style chain provider; submit methods map to provider_submit/submit."""

    def context_for(method: str, args: tuple) -> dict[str, Any]:
        source, stage = MESH_PROVIDER_METHOD_CONTEXT.get(method, _PROVIDER_QUERY)
        return {"source": source, "stage": stage, "provider": provider_name}

    return with_error_safety(provider, context_for, normalizer=normalizer, config=config, on_error=on_error)
