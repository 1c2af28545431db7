import requests
from pyuseragents import random as random_useragent
from web3 import Web3

from data.config import RPC_URL, PROXY


class ChainClient:
    def __init__(self, rpc_url=RPC_URL, proxy=PROXY):
        self.rpc_url = rpc_url
        self.session = requests.Session()
        if proxy:
            self.session.proxies = {
                "http":  f"http://{proxy}",
                "https": f"http://{proxy}"
            }

        self.w3 = Web3(Web3.HTTPProvider(
            rpc_url,
            request_kwargs={'headers': self.get_headers()},
            session=self.session,
        ))

    @staticmethod
    def get_headers():
        base_headers = {
            "Content-Type": 'application/json',
            "User-Agent":   random_useragent(),
        }

        return base_headers

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    def get_balance(self, address: str) -> int:
        return self.w3.eth.get_balance(self.w3.to_checksum_address(address))

    def send_transaction(self, account, transaction: dict) -> str:
        """Подписывает транзакцию ключом аккаунта и отправляет её в сеть.

        Nonce, chainId и цену газа берём у ноды, лимит газа приходит
        в самой транзакции.
        """
        tx = dict(transaction)
        tx['to'] = self.w3.to_checksum_address(tx['to'])
        tx['from'] = account.address
        tx['nonce'] = self.w3.eth.get_transaction_count(account.address)
        tx['chainId'] = self.w3.eth.chain_id
        tx['gasPrice'] = self.w3.eth.gas_price

        signed_tx = account.sign_transaction(tx)
        hash_ = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        return self.w3.to_hex(hash_)

    def wait_for_receipt(self, tx_hash: str):
        return self.w3.eth.wait_for_transaction_receipt(tx_hash)
