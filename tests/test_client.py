import pytest
from web3 import EthereumTesterProvider, Web3

from core.client import ChainClient
from core.mint import Mint
from core.models import MintTransaction
from core.utils import get_account
from conftest import KEY_A, KEY_B

CONTRACT = "0xbff4ca71606c1a9ee4abde68647d2718d20fe358"


def test_client_without_proxy():
    client = ChainClient("http://localhost:8545", proxy=None)

    assert client.rpc_url == "http://localhost:8545"
    assert client.session.proxies == {}


def test_client_with_proxy():
    client = ChainClient("http://localhost:8545", proxy="127.0.0.1:8080")

    assert client.session.proxies == {
        "http": "http://127.0.0.1:8080",
        "https": "http://127.0.0.1:8080",
    }


def test_headers_have_user_agent():
    headers = ChainClient.get_headers()

    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"]


@pytest.fixture
def tester_client():
    client = ChainClient("http://localhost:8545", proxy=None)
    client.w3 = Web3(EthereumTesterProvider())
    return client


def test_is_connected_with_tester(tester_client):
    assert tester_client.is_connected() is True


def test_send_transaction_signs_and_broadcasts(tester_client):
    w3 = tester_client.w3
    account = get_account(KEY_A)
    funding = w3.eth.send_transaction({
        "from": w3.eth.accounts[0],
        "to": account.address,
        "value": 10 ** 18,
    })
    w3.eth.wait_for_transaction_receipt(funding)

    tx = MintTransaction(to=CONTRACT, data="0x1249c58b", gas=300000)
    hash_ = tester_client.send_transaction(account, tx.as_dict())

    assert hash_.startswith("0x")
    assert len(hash_) == 66

    receipt = tester_client.wait_for_receipt(hash_)
    assert receipt["status"] == 1

    sent = w3.eth.get_transaction(hash_)
    assert sent["from"] == account.address
    assert sent["to"] == Web3.to_checksum_address(CONTRACT)
    assert sent["gas"] == 300000
    assert sent["nonce"] == 0


def test_mint_through_real_client(tester_client):
    w3 = tester_client.w3
    account = get_account(KEY_B)
    w3.eth.wait_for_transaction_receipt(w3.eth.send_transaction({
        "from": w3.eth.accounts[0],
        "to": account.address,
        "value": 10 ** 18,
    }))

    result = Mint(KEY_B, tester_client, contract_address=CONTRACT).mint()

    assert result.success is True
    assert result.message == "mint succeeded"
    assert result.tx_hash.startswith("0x")
