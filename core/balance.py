from loguru import logger
from web3 import Web3

from data.config import TOKEN_SYMBOL


def get_balance(client, address: str) -> str:
    """Баланс нативной монеты в виде десятичной строки, "0" при ошибке запроса"""
    try:
        balance_wei = client.get_balance(address)
    except Exception as e:
        logger.error(f'{address} | Ошибка получения баланса: {e}')
        return "0"

    balance = format(Web3.from_wei(balance_wei, 'ether'), 'f')
    logger.info(f'{address} | Баланс: {balance} ${TOKEN_SYMBOL}')

    return balance
