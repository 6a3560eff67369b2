"""
Minimal contract ABIs.

Only the view functions Vigie reads. Escrow contracts in the wild differ
in which of these they implement; a missing one surfaces as
UnsupportedCallError at call time, not at binding time.
"""


def _view(name: str, inputs: list, outputs: list) -> dict:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": inputs,
        "outputs": outputs,
    }


def _param(name: str, type_: str) -> dict:
    return {"name": name, "type": type_, "internalType": type_}


ESCROW_ABI = [
    _view("owner", [], [_param("", "address")]),
    _view("totalDeals", [], [_param("", "uint256")]),
    _view("dealCount", [], [_param("", "uint256")]),
    _view(
        "getDeal",
        [_param("dealId", "uint256")],
        [
            _param("buyer", "address"),
            _param("seller", "address"),
            _param("amount", "uint256"),
            _param("status", "uint8"),
        ],
    ),
    _view("balanceOf", [_param("account", "address")], [_param("", "uint256")]),
]

ERC20_ABI = [
    _view("name", [], [_param("", "string")]),
    _view("symbol", [], [_param("", "string")]),
    _view("decimals", [], [_param("", "uint8")]),
    _view("totalSupply", [], [_param("", "uint256")]),
    _view("balanceOf", [_param("account", "address")], [_param("", "uint256")]),
]
