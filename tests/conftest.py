import pytest
from loguru import logger

KEY_A = "aa" * 32
KEY_B = "bb" * 32
KEY_C = "cc" * 32


class FakeClient:
    rpc_url = "http://localhost:8545"

    def __init__(self, balance=10 ** 18, status=1, send_error=None, wait_error=None, balance_error=None):
        self.balance = balance
        self.status = status
        self.send_error = send_error
        self.wait_error = wait_error
        self.balance_error = balance_error
        self.sent = []
        self.connected = True

    def is_connected(self):
        return self.connected

    def get_balance(self, address):
        if self.balance_error is not None:
            raise self.balance_error
        return self.balance

    def send_transaction(self, account, transaction):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((account.address, transaction))
        return "0x" + f"{len(self.sent):064x}"

    def wait_for_receipt(self, tx_hash):
        if self.wait_error is not None:
            raise self.wait_error
        return {"status": self.status, "transactionHash": tx_hash}


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
