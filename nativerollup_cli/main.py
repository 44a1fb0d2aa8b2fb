"""
nrollup - encode, inspect and dispatch EXECUTE precompile calldata.
"""
import logging
from typing import Optional

import typer

from nativerollup_sdk.calldata import encode_execute_request, read_chain_id
from nativerollup_sdk.config import DEFAULT_NETWORK, NetworkConfig
from nativerollup_sdk.exceptions import NativeRollupError
from nativerollup_sdk.gateway import ExecuteCalldataGateway
from nativerollup_sdk.models import ExecuteRequest, ExecuteTarget, to_bytes
from nativerollup_sdk.oracle import RpcOracle

app = typer.Typer(help="Tools for the NativeRollup EXECUTE precompile gateway.")


def _parse_hex(value: str, name: str) -> bytes:
    try:
        return to_bytes(value)
    except ValueError as e:
        typer.echo(f"Error: {name} is not valid hex: {e}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@app.command("chain-id")
def chain_id(calldata: str = typer.Argument(..., help="Hex-encoded calldata")):
    """Print the chain-ID header of EXECUTE calldata."""
    typer.echo(read_chain_id(_parse_hex(calldata, "calldata")))


@app.command()
def encode(
    chain_id: int = typer.Option(..., help="Chain ID header"),
    target_to: str = typer.Option(..., help="Address the oracle calls"),
    gas_limit: int = typer.Option(30_000_000, help="Execution gas limit"),
    pre_state_hash: str = typer.Option("0x" + "00" * 32, help="Pre-state root"),
    coinbase: str = typer.Option("0x" + "00" * 20, help="Block coinbase"),
    block_number: int = typer.Option(0, help="Block number"),
    gas_price: int = typer.Option(0, help="Gas price"),
    timestamp: int = typer.Option(0, help="Block timestamp"),
    witness: str = typer.Option("0x", help="RLP-encoded witness"),
    withdrawals: str = typer.Option("0x", help="Withdrawals payload"),
    blob_hashes: str = typer.Option("0x", help="Concatenated 32-byte blob hashes"),
    target_value: int = typer.Option(0, help="Value sent with the call"),
    target_data: str = typer.Option("0x", help="Call data of the target call"),
):
    """Print hex calldata for an EXECUTE request."""
    try:
        request = ExecuteRequest(
            chain_id=chain_id,
            pre_state_hash=pre_state_hash,
            gas_limit=gas_limit,
            coinbase=coinbase,
            block_number=block_number,
            gas_price=gas_price,
            timestamp=timestamp,
            witness=witness,
            withdrawals=withdrawals,
            blob_hashes=blob_hashes,
            target=ExecuteTarget(to=target_to, value=target_value, data=target_data),
        )
    except ValueError as e:
        typer.echo(f"Error: invalid request: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo("0x" + encode_execute_request(request).hex())


@app.command()
def dispatch(
    calldata: str = typer.Argument(..., help="Hex-encoded calldata"),
    network: str = typer.Option(DEFAULT_NETWORK, help="Network name from networks.json"),
    rpc_url: Optional[str] = typer.Option(None, help="Override the network RPC URL"),
    chain_id: Optional[int] = typer.Option(None, help="Override the expected chain ID"),
):
    """Dispatch calldata to the EXECUTE precompile of a node."""
    data = _parse_hex(calldata, "calldata")

    try:
        url = NetworkConfig.get_rpc_url(network, override=rpc_url)
        expected = chain_id if chain_id is not None else NetworkConfig.get_chain_id(network)
        oracle = RpcOracle(url, precompile_address=NetworkConfig.get_precompile_address(network))
        gateway = ExecuteCalldataGateway(expected, oracle)
        response = gateway.dispatch(data)
    except (NativeRollupError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"gas_consumed: {response.gas_consumed}")
    typer.echo(f"return_data: 0x{response.return_data.hex()}")
