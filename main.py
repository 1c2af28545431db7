from loguru import logger

from core.batch import run_batch
from core.client import ChainClient
from data.config import RPC_URL, PROXY

if __name__ == '__main__':
    logger.info('Irys testnet: пакетный минт NFT')

    client = ChainClient(RPC_URL, proxy=PROXY)
    run_batch(client=client)
