import json
import os
import re
from pathlib import Path

from eth_account import Account
from loguru import logger

from data.config import PRIVATE_KEYS_FILE

KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")


def normalize_key(line: str):
    """Возвращает ключ без префикса 0x или None, если строка не является ключом"""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    if line.startswith("0x"):
        line = line[2:]

    if not KEY_PATTERN.match(line):
        return None
    return line


def load_private_keys(file_path: Path | str = PRIVATE_KEYS_FILE) -> list[str]:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            lines = file.readlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Ошибка чтения файла с ключами – {file_path}: {e}")
        return []

    keys = []
    for line in lines:
        key = normalize_key(line)
        if key is not None:
            keys.append(key)

    return keys


def get_account(private_key: str):
    """Создаёт аккаунт из приватного ключа"""
    if private_key.startswith("0x"):
        private_key = private_key[2:]

    if not KEY_PATTERN.match(private_key):
        raise ValueError("Неверный формат приватного ключа")
    return Account.from_key(private_key)


def write_json(file_path: Path | str, data):
    os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as file:
        json.dump(data, file, indent=2, ensure_ascii=False)
