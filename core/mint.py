from loguru import logger
from web3 import exceptions

from core.balance import get_balance
from core.models import MintResult, MintTransaction
from core.utils import get_account
from data.config import CONTRACT_ADDRESS, MINT_DATA, GAS_LIMIT, MIN_BALANCE, TOKEN_SYMBOL


class Mint:
    def __init__(
            self,
            key,
            client,
            contract_address=CONTRACT_ADDRESS,
            mint_data=MINT_DATA,
            gas_limit=GAS_LIMIT,
            min_balance=MIN_BALANCE,
    ):
        self.key = key
        self.client = client
        self.contract_address = contract_address
        self.mint_data = mint_data
        self.gas_limit = gas_limit
        self.min_balance = min_balance
        self.account = None
        self.address = None

    def mint(self) -> MintResult:
        try:
            self.account = get_account(self.key)
            self.address = self.account.address
            logger.info(f'Адрес кошелька: {self.address}')

            balance = float(get_balance(self.client, self.address))

            if balance < self.min_balance:
                logger.warning(f'{self.address} | Недостаточный баланс для оплаты газа.'
                               f' Баланс: {balance} ${TOKEN_SYMBOL}')
                return MintResult(False, 'insufficient balance')

            return self.send_tx(self.build_tx())

        except Exception as e:
            logger.error(f'{self.address or "?"} | Ошибка минта: {e}')
            return MintResult(False, str(e))

    def build_tx(self) -> MintTransaction:
        logger.info(f'{self.address} | Контракт: {self.contract_address}, '
                    f'данные: {self.mint_data}, лимит газа: {self.gas_limit}')

        return MintTransaction(
            to=self.contract_address,
            data=self.mint_data,
            gas=self.gas_limit,
        )

    def send_tx(self, transaction: MintTransaction) -> MintResult:
        try:
            hash_ = self.client.send_transaction(self.account, transaction.as_dict())
        except Exception as e:
            logger.error(f'{self.address} | Ошибка отправки транзакции: {e}')
            return MintResult(False, f'send failed: {e}')

        logger.info(f'{self.address} | Транзакция отправлена: {hash_}')

        return self.check_transaction_status(hash_)

    def check_transaction_status(self, hash_: str) -> MintResult:
        logger.info(f'{self.address} | Ожидаем подтверждения транзакции...')
        try:
            tx_receipt = self.client.wait_for_receipt(hash_)
        except (exceptions.Web3Exception, OSError, ValueError) as e:
            logger.error(f'{self.address} | Ошибка ожидания подтверждения: {e}')
            return MintResult(False, f'confirmation failed: {e}', hash_)

        if tx_receipt['status'] == 1:
            logger.success(f'{self.address} | Успешно заминтил NFT\n'
                           f'>>> {hash_}')
            return MintResult(True, 'mint succeeded', hash_)

        logger.error(f'{self.address} | Транзакция завершилась ошибкой: {hash_}')
        return MintResult(False, 'transaction failed', hash_)
