import asyncio

import pytest

from amasign.exceptions import UsageError
from amasign.modules.chain import ChainModule, SortOrder

from conftest import ScriptedProvider, tool_response


def run(coro):
    return asyncio.run(coro)


def last_call(provider):
    params = provider.sent[-1]["params"]
    return params["name"], params["arguments"]


def test_queries_build_tool_calls():
    provider = ScriptedProvider([tool_response({"ok": True})] * 7)
    chain = ChainModule(provider)

    run(chain.get_account_balance("ADDR"))
    assert last_call(provider) == ("get_account_balance", {"address": "ADDR"})

    run(chain.get_chain_stats())
    assert last_call(provider) == ("get_chain_stats", {})

    run(chain.get_block_by_height(0))
    assert last_call(provider) == ("get_block_by_height", {"height": 0})

    run(chain.get_transaction("HASH"))
    assert last_call(provider) == ("get_transaction", {"tx_hash": "HASH"})

    run(chain.get_transaction_history("ADDR", limit=10, offset=5, sort=SortOrder.DESC))
    assert last_call(provider) == (
        "get_transaction_history",
        {"address": "ADDR", "limit": 10, "offset": 5, "sort": "desc"},
    )

    run(chain.get_validators())
    assert last_call(provider) == ("get_validators", {})

    run(chain.get_contract_state("Coin", "balance:AMA"))
    assert last_call(provider) == (
        "get_contract_state",
        {"contract_address": "Coin", "key": "balance:AMA"},
    )


def test_history_omits_unset_arguments():
    provider = ScriptedProvider([tool_response([])])
    assert run(ChainModule(provider).get_transaction_history("ADDR")) == []
    assert last_call(provider) == ("get_transaction_history", {"address": "ADDR"})


def test_invalid_query_arguments():
    provider = ScriptedProvider([])
    chain = ChainModule(provider)
    with pytest.raises(UsageError):
        run(chain.get_block_by_height(-1))
    with pytest.raises(UsageError):
        run(chain.get_transaction_history("ADDR", sort="sideways"))
    with pytest.raises(UsageError):
        run(chain.get_account_balance(""))
    assert provider.sent == []
