import os
import random
import time

from loguru import logger

from core.client import ChainClient
from core.mint import Mint
from core.models import build_report
from core.utils import load_private_keys, write_json
from data.config import (
    CONTRACT_ADDRESS,
    DELAY_BETWEEN_ACCOUNT,
    PRIVATE_KEYS_FILE,
    RESULTS_DIR,
)


def run_batch(
        client=None,
        keys_file=PRIVATE_KEYS_FILE,
        results_dir=RESULTS_DIR,
        contract_address=CONTRACT_ADDRESS,
        delay=DELAY_BETWEEN_ACCOUNT,
        **mint_kwargs,
):
    """Минтит по очереди со всех кошельков из файла и сохраняет отчёт.

    Возвращает путь к файлу с результатами или None, если валидных
    ключей не нашлось.
    """
    if client is None:
        client = ChainClient()
    logger.info(f'Подключение к RPC: {client.rpc_url}')

    key_list = load_private_keys(keys_file)
    if not key_list:
        logger.error('Не найдено ни одного валидного приватного ключа')
        logger.error(f'Проверьте, что файл {keys_file} существует и содержит ключи')
        return None

    logger.info(f'Загружено приватных ключей: {len(key_list)}')

    if client.is_connected():
        logger.success('Подключение к сети установлено')
    else:
        logger.warning(f'Нет ответа от RPC {client.rpc_url}, пробуем продолжить')

    results = []
    for index, key in enumerate(key_list, start=1):
        logger.info('=' * 50)
        logger.info(f'Кошелёк {index}/{len(key_list)}')

        action = Mint(
            key=key,
            client=client,
            contract_address=contract_address,
            **mint_kwargs,
        )
        result = action.mint()
        results.append(result._replace(wallet=index))

        if index < len(key_list):
            sleep_time = random.uniform(*delay)
            logger.info(f'Ждём {sleep_time:.1f} сек...')
            time.sleep(sleep_time)

    report = build_report(results, contract_address)
    log_statistics(report)

    file_path = os.path.join(results_dir, f'mint_results_{int(time.time() * 1000)}.json')
    write_json(file_path, report)
    logger.info(f'Результаты сохранены в {file_path}')

    return file_path


def log_statistics(report):
    logger.info('=' * 50)
    logger.info('Статистика минта')
    logger.info(f'Всего кошельков: {report["totalCount"]}')
    logger.info(f'Успешно: {report["successCount"]}')
    logger.info(f'С ошибкой: {report["failureCount"]}')
    logger.info(f'Процент успеха: {report["successRate"]}%')
